"""リクエスト入力解析のテスト"""

import pytest

from app.core.exceptions import InvalidInputError
from app.utils.parsing import parse_task_body, parse_task_id


class TestParseTaskId:
    """タスクID変換テスト"""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("1", 1),
            ("0", 0),
            ("-5", -5),
            ("+12", 12),
            ("007", 7),
            ("9223372036854775807", 2**63 - 1),
            ("-9223372036854775808", -(2**63)),
        ],
    )
    def test_valid_ids(self, value: str, expected: int) -> None:
        assert parse_task_id(value) == expected

    @pytest.mark.parametrize(
        "value",
        ["", " ", " 1", "1 ", "abc", "1.0", "1e3", "1_000", "0x1f", "+", "9223372036854775808", "１２"],
    )
    def test_invalid_ids(self, value: str) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            parse_task_id(value)

        assert exc_info.value.message == "invalid task ID"
        assert exc_info.value.status_code == 400

    def test_none(self) -> None:
        with pytest.raises(InvalidInputError):
            parse_task_id(None)


class TestParseTaskBody:
    """タスクボディ解析テスト"""

    def test_full_body(self) -> None:
        task_in = parse_task_body(b'{"title": "buy milk", "status": "todo"}')

        assert task_in.title == "buy milk"
        assert task_in.status == "todo"

    def test_missing_and_null_fields(self) -> None:
        task_in = parse_task_body('{"status": null}')

        assert task_in.title == ""
        assert task_in.status == ""

    def test_unknown_keys_ignored(self) -> None:
        task_in = parse_task_body('{"id": 5, "title": "a", "status": "b", "extra": [1, 2]}')

        assert task_in.model_dump() == {"title": "a", "status": "b"}

    def test_keys_match_case_insensitively(self) -> None:
        """キー名の大文字・小文字は区別しない"""
        task_in = parse_task_body('{"Title": "A", "STATUS": "b"}')

        assert task_in.title == "A"
        assert task_in.status == "b"

    def test_later_key_wins(self) -> None:
        """同じフィールドに対応するキーは後勝ち（nullは上書きしない）"""
        task_in = parse_task_body('{"title": "a", "Title": "B", "status": "x", "Status": null}')

        assert task_in.title == "B"
        assert task_in.status == "x"

    def test_case_folded_key_type_checked(self) -> None:
        with pytest.raises(InvalidInputError):
            parse_task_body('{"TITLE": 1}')

    @pytest.mark.parametrize(
        "body",
        [
            "",
            "null",
            "[]",
            "42",
            '{"title": "a"',
            '{"title": 1}',
            '{"status": true}',
            '{"title": {"nested": "x"}}',
        ],
    )
    def test_invalid_bodies(self, body: str) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            parse_task_body(body)

        assert exc_info.value.message == "invalid JSON input"
