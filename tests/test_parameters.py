from inidoc import Document, Parameters, VALID_MARKERS
import pytest
from typing import get_args
from itertools import product


class TestParameters:

    def test_defaults(self):
        parameters = Parameters()
        assert parameters.comment_indicators == (";",)
        assert parameters.equal_indicators == ("=",)
        assert parameters.auto_create_sections
        assert parameters.auto_create_keys
        assert parameters.encoding is None

    def test_string_of_several_indicators(self):
        parameters = Parameters(comment_indicators=";#", equal_indicators="=:")
        assert parameters.comment_indicators == (";", "#")
        assert parameters.comment_indicator == ";"
        assert parameters.equal_indicators == ("=", ":")
        assert parameters.equal_indicator == "="

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"comment_indicators": "["},
            {"equal_indicators": "["},
            {"comment_indicators": "a"},
            {"equal_indicators": ""},
            {"comment_indicators": "="},
            {"comment_indicators": (";", "="), "equal_indicators": "="},
        ],
    )
    def test_invalid_markers(self, kwargs):
        with pytest.raises(ValueError):
            Parameters(**kwargs)

    def test_markers_checked_on_assignment(self):
        parameters = Parameters()
        with pytest.raises(ValueError):
            parameters.equal_indicators = ";"
        assert parameters.equal_indicators == ("=",)

    def test_update(self):
        parameters = Parameters()
        parameters.update(auto_create_keys=False, comment_indicators="#")
        assert not parameters.auto_create_keys
        assert parameters.comment_indicators == ("#",)
        with pytest.raises(TypeError):
            parameters.update(multiline_allowed=True)

    @pytest.mark.parametrize(
        "kwargs",
        [{"comment_indicator": "#"}, {"equal_indicator": ":"}, {"copy": None}],
    )
    def test_update_rejects_read_only_names(self, kwargs):
        parameters = Parameters()
        with pytest.raises(TypeError):
            parameters.update(**kwargs)
        with pytest.raises(TypeError):
            Document(**kwargs)
        assert parameters.comment_indicators == (";",)
        assert parameters.equal_indicators == ("=",)

    def test_copy(self):
        parameters = Parameters(
            comment_indicators="#", auto_create_keys=False, encoding="latin-1"
        )
        copied = parameters.copy()
        assert copied is not parameters
        assert copied.comment_indicators == ("#",)
        assert not copied.auto_create_keys
        assert copied.encoding == "latin-1"

    def test_document_kwargs_override_without_mutating(self):
        parameters = Parameters(auto_create_keys=True)
        doc = Document(parameters=parameters, auto_create_keys=False)
        assert not doc.parameters.auto_create_keys
        assert parameters.auto_create_keys

    @pytest.mark.parametrize(
        "comment_indicator,equal_indicator",
        [
            (c, e)
            for c, e in product(get_args(VALID_MARKERS), get_args(VALID_MARKERS))
            if c != e
        ],
    )
    def test_read_with_markers(self, comment_indicator, equal_indicator):
        doc = Document(
            comment_indicators=comment_indicator, equal_indicators=equal_indicator
        )
        doc.loads(
            f"{comment_indicator} a comment\n"
            "[Section]\n"
            f"key {equal_indicator} value\n"
        )
        assert doc.get_value("key", "Section") == "value"
        assert doc.get_section_comment("Section") == "a comment"
