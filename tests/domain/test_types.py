"""Tests for field kinds and the value-type registry."""

from wedbook.domain.person import Tag
from wedbook.domain.types import FIELD_TYPES, UNTRIMMED_KINDS, FieldKind


class TestFieldKind:
    def test_values(self) -> None:
        assert FieldKind.WEDDING_NAME == "wedding_name"
        assert FieldKind("datetime") is FieldKind.DATETIME

    def test_member_count(self) -> None:
        # ten scalar kinds plus the tag batch
        assert len(FieldKind) == 11


class TestFieldTypes:
    def test_covers_every_string_kind(self) -> None:
        assert set(FIELD_TYPES) == set(FieldKind) - {FieldKind.INDEX, FieldKind.TAGS}

    def test_tag_is_only_untrimmed_kind(self) -> None:
        assert UNTRIMMED_KINDS == {FieldKind.TAG}
        assert FIELD_TYPES[FieldKind.TAG] is Tag

    def test_messages_are_distinct(self) -> None:
        messages = [cls.MESSAGE_CONSTRAINTS for cls in FIELD_TYPES.values()]
        assert len(set(messages)) == len(messages)
