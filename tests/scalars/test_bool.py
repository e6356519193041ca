"""
Тесты разбора логических значений.
"""

import pytest

from estring import EString, ParseError, Reason


class TestBoolLeaf:

    @pytest.mark.parametrize("token", ["true", "t", "yes", "y", "on", "1"])
    def test_truthy_tokens(self, token):
        assert EString(token).parse(bool) is True
        assert EString(token.upper()).parse(bool) is True

    @pytest.mark.parametrize("token", ["false", "f", "no", "n", "off", "0", ""])
    def test_falsy_tokens(self, token):
        assert EString(token).parse(bool) is False
        assert EString(token.upper()).parse(bool) is False

    def test_mixed_case(self):
        assert EString("YeS").parse(bool) is True
        assert EString("oFf").parse(bool) is False

    @pytest.mark.parametrize("token", ["maybe", "something", "2", " true", "tru"])
    def test_unknown_token_is_parse_error(self, token):
        with pytest.raises(ParseError) as ei:
            EString(token).parse(bool)
        assert ei.value.fragment == token
        assert ei.value.reason is Reason.PARSE
