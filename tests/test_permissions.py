"""
Authorization policy: a requestor may act only on what they own.
"""

from uuid import UUID, uuid4

import pytest

from socialhub.shared.core.exceptions import PermissionDeniedError
from socialhub.shared.core.permissions import can_act, canonical_id, ensure_can_act


class TestCanonicalId:

    def test_uuid_and_its_string_forms_agree(self):
        value = UUID("550e8400-e29b-41d4-a716-446655440000")

        assert canonical_id(value) == canonical_id("550E8400E29B41D4A716446655440000")
        assert canonical_id(value) == "550e8400-e29b-41d4-a716-446655440000"

    def test_non_uuid_strings_are_kept_verbatim(self):
        assert canonical_id("abc") == "abc"

    def test_none_stays_none(self):
        assert canonical_id(None) is None


class TestCanAct:

    def test_owner_may_act(self):
        owner = uuid4()
        assert can_act(owner, owner)
        assert can_act(str(owner), owner)

    def test_other_user_may_not_act(self):
        assert not can_act(uuid4(), uuid4())

    @pytest.mark.parametrize("requestor, owner", [(None, uuid4()), (uuid4(), None), (None, None)])
    def test_missing_identifiers_deny(self, requestor, owner):
        assert not can_act(requestor, owner)

    def test_ensure_can_act_raises_on_deny(self):
        with pytest.raises(PermissionDeniedError) as exc_info:
            ensure_can_act(uuid4(), uuid4())

        assert exc_info.value.status_code == 403
        assert "permission" in exc_info.value.message

    def test_ensure_can_act_custom_message(self):
        with pytest.raises(PermissionDeniedError, match="not yours"):
            ensure_can_act(uuid4(), uuid4(), message="not yours")

    def test_ensure_can_act_allows_owner(self):
        owner = uuid4()
        ensure_can_act(str(owner), owner)
