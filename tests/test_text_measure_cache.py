import math

import pytest

from raikou.core.geometry import Size
from raikou.layout.text_measure_cache import (
    Ellipsize,
    EllipsizeHeightLimit,
    TextMeasureCache,
    Wrap,
)

AVAILABLE = Size(100.0, math.inf)
NONE = Ellipsize.none()


def test_cache_hit_and_miss():
    cache = TextMeasureCache()
    assert cache.get("hello", "", 12.0, 16.0, Wrap.WORD, NONE, AVAILABLE) is None

    cache.insert("hello", "", 12.0, 16.0, Wrap.WORD, NONE, AVAILABLE, Size(30.0, 16.0))
    assert cache.get("hello", "", 12.0, 16.0, Wrap.WORD, NONE, AVAILABLE) == Size(30.0, 16.0)

    assert cache.get("world", "", 12.0, 16.0, Wrap.WORD, NONE, AVAILABLE) is None
    assert cache.get("hello", "Mono", 12.0, 16.0, Wrap.WORD, NONE, AVAILABLE) is None
    assert cache.get("hello", "", 14.0, 16.0, Wrap.WORD, NONE, AVAILABLE) is None
    assert cache.get("hello", "", 12.0, 20.0, Wrap.WORD, NONE, AVAILABLE) is None
    assert cache.get("hello", "", 12.0, 16.0, Wrap.NONE, NONE, AVAILABLE) is None
    ellipsized = Ellipsize.end(EllipsizeHeightLimit.lines(1))
    assert cache.get("hello", "", 12.0, 16.0, Wrap.WORD, ellipsized, AVAILABLE) is None
    assert (
        cache.get("hello", "", 12.0, 16.0, Wrap.WORD, NONE, Size(200.0, math.inf)) is None
    )


def test_limit_kind_distinguishes_entries():
    cache = TextMeasureCache()
    by_lines = Ellipsize.middle(EllipsizeHeightLimit.lines(1))
    by_height = Ellipsize.middle(EllipsizeHeightLimit.height(1.0))
    cache.insert("a", "", 12.0, 16.0, Wrap.WORD, by_lines, AVAILABLE, Size(1.0, 1.0))
    assert cache.get("a", "", 12.0, 16.0, Wrap.WORD, by_height, AVAILABLE) is None
    start = Ellipsize.start(EllipsizeHeightLimit.lines(1))
    assert cache.get("a", "", 12.0, 16.0, Wrap.WORD, start, AVAILABLE) is None


def test_nan_keys_match_themselves_and_signed_zero_differs():
    cache = TextMeasureCache()
    nan_size = Size(math.nan, 5.0)
    cache.insert("x", "", 12.0, 16.0, Wrap.GLYPH, NONE, nan_size, Size(2.0, 2.0))
    assert cache.get("x", "", 12.0, 16.0, Wrap.GLYPH, NONE, nan_size) == Size(2.0, 2.0)
    cache.insert("x", "", 12.0, 16.0, Wrap.GLYPH, NONE, Size(0.0, 0.0), Size(3.0, 3.0))
    assert cache.get("x", "", 12.0, 16.0, Wrap.GLYPH, NONE, Size(-0.0, 0.0)) is None


def test_len_overwrite_and_clear():
    cache = TextMeasureCache()
    assert cache.is_empty()
    cache.insert("a", "", 12.0, 16.0, Wrap.WORD, NONE, AVAILABLE, Size(1.0, 1.0))
    cache.insert("a", "", 12.0, 16.0, Wrap.WORD, NONE, AVAILABLE, Size(9.0, 9.0))
    cache.insert("b", "", 12.0, 16.0, Wrap.WORD, NONE, AVAILABLE, Size(1.0, 1.0))
    assert len(cache) == 2
    assert cache.get("a", "", 12.0, 16.0, Wrap.WORD, NONE, AVAILABLE) == Size(9.0, 9.0)
    cache.clear()
    assert len(cache) == 0
    assert cache.is_empty()


def test_invalid_ellipsize_rejected():
    with pytest.raises(ValueError):
        EllipsizeHeightLimit.lines(-1)
    with pytest.raises(ValueError):
        Ellipsize("end", None)
    with pytest.raises(ValueError):
        Ellipsize("sideways", EllipsizeHeightLimit.lines(1))