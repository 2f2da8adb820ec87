"""Tests for annotation keys and linter message grouping"""

import logging

import pytest

from reviewmap.annotations.keys import AnnotationKey, InvalidCoordinateError, create_comment_key
from reviewmap.annotations.linter import (
    LinterMessage,
    LinterMessagesByPath,
    MessageType,
    find_most_severe_type,
    find_most_severe_type_for_path,
    get_message_map,
)


class TestCreateCommentKey:
    """Test create_comment_key()"""

    def test_file_and_line(self):
        assert create_comment_key("manifest.json", 5) == "file:manifest.json;line:5"

    def test_with_version(self):
        assert (
            create_comment_key("manifest.json", 5, version_id=3)
            == "version:3;file:manifest.json;line:5"
        )

    def test_file_only(self):
        assert create_comment_key("manifest.json", None) == "file:manifest.json"

    def test_version_level(self):
        """Both fields empty is a whole-version annotation"""
        assert create_comment_key(None, None) == ""
        assert create_comment_key(None, None, version_id=1) == "version:1"

    def test_line_without_file(self):
        with pytest.raises(InvalidCoordinateError, match="fileName is empty"):
            create_comment_key(None, 5)

    def test_invalid_coordinate_is_a_value_error(self):
        with pytest.raises(ValueError):
            create_comment_key(None, 1, version_id=2)

    def test_line_zero_is_kept(self):
        assert create_comment_key("a.js", 0) == "file:a.js;line:0"

    def test_equal_inputs_equal_keys(self):
        assert create_comment_key("a.js", 1) == create_comment_key("a.js", 1)

    @pytest.mark.parametrize(
        "first,second",
        [
            (("a.js", 1), ("a.js", 2)),
            (("a.js", 1), ("b.js", 1)),
            (("a.js", None), ("a.js", 1)),
            ((None, None), ("a.js", None)),
            (("a;line:5", None), ("a", 5)),
            (("a;version:1", None), ("a", None, 1)),
        ],
    )
    def test_different_inputs_different_keys(self, first, second):
        assert create_comment_key(*first) != create_comment_key(*second)

    def test_separators_in_file_name_are_escaped(self):
        assert create_comment_key("a;line:5", None) == "file:a%3Bline%3A5"

    def test_path_separators_are_kept(self):
        assert create_comment_key("src/app.js", 1) == "file:src/app.js;line:1"


class TestAnnotationKey:
    def test_key(self):
        assert AnnotationKey("a.js", 2, version_id=9).key == "version:9;file:a.js;line:2"

    def test_validates_on_creation(self):
        with pytest.raises(InvalidCoordinateError):
            AnnotationKey(file_name=None, line=5)

    def test_hashable(self):
        keys = {AnnotationKey("a.js", 1), AnnotationKey("a.js", 1)}
        assert len(keys) == 1


class TestLinterMessage:
    def test_from_external(self, linter_result):
        message = LinterMessage.from_external(linter_result["validation"]["messages"][1])

        assert message.uid == "2"
        assert message.type is MessageType.WARNING
        assert message.file == "src/background.js"
        assert message.line == 3
        assert message.code == ["CODE_2"]
        assert message.description == ["description 2"]

    def test_keeps_list_descriptions(self, linter_result):
        data = dict(linter_result["validation"]["messages"][0], description=["a", "b"])
        assert LinterMessage.from_external(data).description == ["a", "b"]

    def test_to_dict(self, linter_result):
        message = LinterMessage.from_external(linter_result["validation"]["messages"][0])
        assert message.to_dict()["type"] == "error"


class TestGetMessageMap:
    """Test get_message_map()"""

    def test_groups_by_path_and_line(self, linter_result, fake_logger):
        message_map = get_message_map(linter_result, log=fake_logger)

        assert sorted(message_map) == ["manifest.json", "src/background.js"]
        assert [m.uid for m in message_map["manifest.json"].global_messages] == ["1"]
        assert message_map["manifest.json"].by_line == {}

        by_line = message_map["src/background.js"].by_line
        assert [m.uid for m in by_line[3]] == ["2", "3"]
        assert [m.uid for m in by_line[8]] == ["4"]

    def test_logs_messages_without_a_file(self, linter_result, fake_logger):
        get_message_map(linter_result, log=fake_logger)

        fake_logger.error.assert_called_once()
        assert "message 5" in fake_logger.error.call_args[0]

    def test_module_logger_by_default(self, linter_result, caplog):
        with caplog.at_level(logging.ERROR, logger="reviewmap.annotations.linter"):
            get_message_map(linter_result)
        assert "not mapped to a file" in caplog.text

    def test_no_messages(self):
        assert get_message_map({"validation": {"messages": []}}) == {}


class TestFindMostSevereType:
    def _message(self, type_):
        return LinterMessage(uid=type_, message="", type=MessageType(type_))

    @pytest.mark.parametrize(
        "types,expected",
        [
            (["notice", "warning", "error"], MessageType.ERROR),
            (["notice", "warning"], MessageType.WARNING),
            (["notice"], MessageType.NOTICE),
            (["error", "notice"], MessageType.ERROR),
        ],
    )
    def test_most_severe(self, types, expected):
        assert find_most_severe_type([self._message(t) for t in types]) is expected

    def test_no_messages(self):
        assert find_most_severe_type([]) is None

    def test_for_path(self, linter_result, fake_logger):
        message_map = get_message_map(linter_result, log=fake_logger)

        assert find_most_severe_type_for_path(message_map, "manifest.json") is MessageType.ERROR
        assert find_most_severe_type_for_path(message_map, "src/background.js") is MessageType.WARNING
        assert find_most_severe_type_for_path(message_map, "missing.js") is None

    def test_all_messages_order(self):
        first = self._message("notice")
        second = self._message("error")
        third = self._message("warning")
        by_path = LinterMessagesByPath(global_messages=[first], by_line={9: [third], 2: [second]})

        assert by_path.all_messages() == [first, second, third]
