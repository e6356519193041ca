"""
Tests for the Sum aggregate.
"""

from decimal import Decimal

import pytest

from estring import EString, ParseError, Product, Reason, Sum, SepVec, to_estring

CommaVec = SepVec[int, ","]
PlusVec = SepVec[int, "+"]


class TestSum:

    def test_parse_vec(self):
        res = EString("1,2,3").parse(Sum[CommaVec])
        assert res == Sum[CommaVec](CommaVec([1, 2, 3]))
        assert res.inner == (1, 2, 3)

    def test_aggregate_vector(self):
        assert EString("1,2,3").parse(Sum[CommaVec]).agg() == 6

    def test_aggregate_vector_with_inner_vector(self):
        """Nested containers are flattened before summing"""
        res = EString("1+2,2,3").parse(Sum[SepVec[PlusVec, ","]])
        assert res.agg() == 8

    def test_aggregate_vector_with_inner_aggregation(self):
        res = EString("1+2,2,3").parse(Sum[SepVec[Sum[PlusVec], ","]])
        assert res.agg() == 8

    def test_aggregate_floats(self):
        assert EString("0.5,0.25").parse(Sum[SepVec[float, ","]]).agg() == 0.75

    def test_aggregate_single_scalar(self):
        assert EString("5").parse(Sum[int]).agg() == 5

    def test_identity_for_absent_values(self):
        assert EString("").parse(Sum[SepVec[int | None, ","]]).agg() == 0

    def test_items_of_aggregate_is_its_result(self):
        assert EString("1,2,3").parse(Sum[CommaVec]).items() == [6]

    def test_format_delegates_to_inner(self):
        res = EString("1, 2,3").parse(Sum[CommaVec])
        assert to_estring(res) == "1,2,3"
        assert str(res) == "1,2,3"

    def test_parse_error_passes_through(self):
        with pytest.raises(ValueError):
            EString("1,a").parse(Sum[CommaVec])

    def test_text_items_cannot_be_summed(self):
        res = EString("a,b").parse(Sum[SepVec[str, ","]])
        with pytest.raises(TypeError, match="cannot be aggregated"):
            res.agg()

    def test_float_identity_is_integer_zero(self):
        res = EString(",").parse(Sum[SepVec[float | None, ","]])
        assert res.agg() == 0
        assert to_estring(res.agg()) == "0"


class TestDecimalSum:

    def test_exact_decimal_sum(self):
        res = EString("0.10,0.20").parse(Sum[SepVec[Decimal, ","]])
        assert res.agg() == Decimal("0.30")

    def test_opposite_infinities_give_nan(self):
        res = EString("Infinity,-Infinity").parse(Sum[SepVec[Decimal, ","]])
        assert res.agg().is_nan()

    def test_infinity_times_zero_gives_nan(self):
        res = EString("Infinity*0").parse(Product[SepVec[Decimal, "*"]])
        assert res.agg().is_nan()

    def test_signalling_nan_is_parse_error(self):
        with pytest.raises(ParseError) as ei:
            EString("1,sNaN").parse(Sum[SepVec[Decimal, ","]])
        assert ei.value == ParseError("sNaN", Reason.PARSE)
