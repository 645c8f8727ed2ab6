#!/usr/bin/env python3

# Copyright (C) 2023 The ecproj developers
#
# This file is part of ecproj. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecproj including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.


"Tests for the `ecproj.curve_params` module."

import json
import logging
from typing import Dict

import pytest

from ecproj.curve_params import (
    CURVES,
    CurveParams,
    curves_from_dict,
    load_curves,
    save_curves,
    secp256k1,
)
from ecproj.exceptions import ECProjTypeError, ECProjValueError

# test curves: very low cardinality
low_card_curves: Dict[str, CurveParams] = {}
# 13 % 4 = 1; 13 % 8 = 5
low_card_curves["ec13_11"] = CurveParams(13, 7, 6, (1, 1), 11, 1)
low_card_curves["ec13_19"] = CurveParams(13, 0, 2, (1, 9), 19, 1)
# 17 % 4 = 1; 17 % 8 = 1
low_card_curves["ec17_13"] = CurveParams(17, 6, 8, (0, 12), 13, 1)
low_card_curves["ec17_23"] = CurveParams(17, 3, 5, (1, 14), 23, 1)
# 19 % 4 = 3; 19 % 8 = 3
low_card_curves["ec19_13"] = CurveParams(19, 0, 2, (4, 16), 13, 1)
# 23 % 4 = 3; 23 % 8 = 7
low_card_curves["ec23_19"] = CurveParams(23, 9, 7, (5, 4), 19, 1)
low_card_curves["ec23_31"] = CurveParams(23, 5, 1, (0, 1), 31, 1)

# a = 0, as in secp256k1
a0_curves = {k: v for k, v in low_card_curves.items() if v.a == 0}

all_curves: Dict[str, CurveParams] = {}
all_curves.update(low_card_curves)
all_curves.update(CURVES)


def test_exceptions() -> None:

    # good curve
    CurveParams(13, 0, 2, (1, 9), 19, 1)
    # good curve, point arithmetic does not need G and n
    CurveParams(13, 0, 2)

    with pytest.raises(ECProjValueError, match="p is not prime: "):
        CurveParams(15, 0, 2)

    with pytest.raises(ECProjValueError, match="p is not prime: "):
        CurveParams(2, 0, 1)

    with pytest.raises(ECProjValueError, match="negative a: "):
        CurveParams(13, -1, 2)

    with pytest.raises(ECProjValueError, match="p <= a: "):
        CurveParams(13, 13, 2)

    with pytest.raises(ECProjValueError, match="negative b: "):
        CurveParams(13, 0, -2)

    with pytest.raises(ECProjValueError, match="p <= b: "):
        CurveParams(13, 0, 13)

    with pytest.raises(ECProjValueError, match="zero discriminant"):
        CurveParams(11, 7, 7)

    err_msg = "Generator must be a sequence\\[int, int\\]"
    with pytest.raises(ECProjValueError, match=err_msg):
        CurveParams(13, 0, 2, (1, 9, 1), 19, 1)  # type: ignore

    with pytest.raises(ECProjValueError, match="Generator is not on the curve"):
        CurveParams(13, 0, 2, (2, 9), 19, 1)

    with pytest.raises(ECProjValueError, match="n is not prime: "):
        CurveParams(13, 0, 2, (1, 9), 20, 1)

    with pytest.raises(ECProjValueError, match="n\\*h not in "):
        CurveParams(13, 0, 2, (1, 9), 71, 1)

    with pytest.raises(ECProjValueError, match="invalid cofactor: "):
        CurveParams(13, 0, 2, (1, 9), 19, 0)

    # validation can be skipped
    CurveParams(15, 0, 2, check_validity=False)


def test_integer_representations() -> None:
    ec = CurveParams("0d", "0x00", b"\x02", ("01", "0x09"), "13", 1)
    assert ec == low_card_curves["ec13_19"]
    assert ec.G == (1, 9)
    assert ec.n == 19


def test_secp256k1() -> None:
    assert secp256k1.name == "secp256k1"
    assert secp256k1.p == 2 ** 256 - 2 ** 32 - 977
    assert secp256k1.a == 0
    assert secp256k1.b == 7
    assert secp256k1.G == (
        0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
        0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
    )
    assert secp256k1.n == (
        0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
    )
    assert secp256k1.h == 1
    assert secp256k1 is CURVES["secp256k1"]


def test_y2() -> None:
    for ec in all_curves.values():
        assert ec.G is not None
        assert ec.is_on_curve(ec.G)
        assert ec.y2(ec.G[0]) == ec.G[1] * ec.G[1] % ec.p
        # the opposite point is on curve too
        assert ec.is_on_curve((ec.G[0], ec.p - ec.G[1]))

    ec = low_card_curves["ec13_19"]
    assert [ec.y2(x) for x in range(4)] == [2, 3, 10, 3]


def test_is_on_curve() -> None:
    ec = low_card_curves["ec13_19"]
    assert not ec.is_on_curve((1, 8))
    # out of range coordinates
    assert not ec.is_on_curve((1, 9 + ec.p))
    with pytest.raises(ECProjTypeError, match="point must be a tuple\\[int, int\\]"):
        ec.is_on_curve((1, 9, 1))  # type: ignore


def test_str() -> None:
    ec = low_card_curves["ec13_19"]
    expected = "Curve\n p   = 13\n a   = 0\n b   = 2"
    assert str(CurveParams(13, 0, 2)) == expected
    expected += "\n x_G = 1\n y_G = 9\n n   = 19\n h   = 1"
    assert str(ec) == expected
    lines = str(secp256k1).splitlines()
    assert lines[0] == "Curve secp256k1"
    assert lines[1] == (
        " p   = FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF "
        "FFFFFFFF FFFFFFFF FFFFFFFE FFFFFC2F"
    )
    assert lines[3] == " b   = 07"


def test_json() -> None:
    for ec in all_curves.values():
        ec_dict = ec.to_dict()
        assert isinstance(ec_dict["p"], str)
        assert ec == CurveParams.from_dict(ec_dict)
        assert ec == CurveParams.from_json(ec.to_json())

    ec = CurveParams(13, 0, 2)
    ec_dict = ec.to_dict()
    assert ec_dict["G"] is None
    assert ec_dict["n"] is None
    assert ec == CurveParams.from_dict(ec_dict)

    # plain json integers are accepted too
    ec = CurveParams.from_dict({"p": 19, "a": 0, "b": 2, "G": [4, 16], "n": 13, "h": 1})
    assert ec == low_card_curves["ec19_13"]

    with pytest.raises(ECProjValueError, match="zero discriminant"):
        CurveParams.from_dict({"p": 11, "a": 7, "b": 7})

    err_msg = "Generator must be a sequence\\[int, int\\]"
    with pytest.raises(ECProjValueError, match=err_msg):
        CurveParams.from_dict({"p": 13, "a": 0, "b": 2, "G": [1, 9, 1]})


def test_load_save_curves(tmp_path, caplog) -> None:
    filename = str(tmp_path / "curves.json")
    save_curves(low_card_curves, filename)
    with open(filename, "r", encoding="ascii") as file_:
        data = json.load(file_)
    assert sorted(data) == sorted(low_card_curves)

    with caplog.at_level(logging.DEBUG, logger="ecproj.curve_params"):
        curves = load_curves(filename)
    assert "loaded 7 curve(s)" in caplog.text

    for ec_name, ec in curves.items():
        assert ec.name == ec_name
        original = low_card_curves[ec_name]
        assert (ec.p, ec.a, ec.b, ec.G, ec.n, ec.h) == (
            original.p,
            original.a,
            original.b,
            original.G,
            original.n,
            original.h,
        )


def test_curves_from_dict() -> None:
    data = {"tiny": {"p": "13", "a": "00", "b": "02"}}
    curves = curves_from_dict(data)
    assert curves["tiny"] == CurveParams(0x13, 0, 2, name="tiny")
    # the input is not modified
    assert "name" not in data["tiny"]
