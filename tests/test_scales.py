import numpy as np
import pytest

from utils.errors import EmptySeriesError
from visualization.scales import LinearScale, build_scales, extent, value_domain, year_domain


def test_extent_is_min_and_max():
    assert extent([3.0, -1.0, 7.5]) == (-1.0, 7.5)


def test_empty_series_has_no_extent():
    with pytest.raises(EmptySeriesError):
        extent([])


def test_value_domain_is_padded_by_one_unit():
    assert value_domain([13.9, 14.2, 14.8]) == pytest.approx((12.9, 15.8))


def test_year_domain_is_unpadded():
    assert year_domain([1990, 1960, 2023]) == (1960.0, 2023.0)


def test_linear_scale_maps_endpoints_and_midpoint():
    x = LinearScale((1960.0, 2020.0), (0.0, 600.0))
    assert x(1960) == 0.0
    assert x(2020) == 600.0
    assert x(1990) == pytest.approx(300.0)


def test_linear_scale_maps_arrays():
    x = LinearScale((0.0, 10.0), (0.0, 100.0))
    np.testing.assert_allclose(x([0, 5, 10]), [0.0, 50.0, 100.0])


def test_inverted_range_puts_large_values_on_top():
    y = LinearScale((0.0, 10.0), (430.0, 0.0))
    assert y(10) == 0.0
    assert y(0) == 430.0
    assert y(2.5) == pytest.approx(322.5)


def test_degenerate_domain_maps_to_range_middle():
    x = LinearScale((2000.0, 2000.0), (0.0, 700.0))
    assert x(2000) == 350.0


def test_build_scales_uses_plot_area():
    x, y = build_scales([1960, 2023], [13.9, 14.8], width=700, height=430)
    assert x.domain == (1960.0, 2023.0)
    assert x.range == (0.0, 700.0)
    assert y.domain == pytest.approx((12.9, 15.8))
    assert y.range == (430.0, 0.0)
