import pytest

from docscan.pdf.geometry import A4_PORTRAIT, fit_image


class TestFitImage:
    def test_landscape_image_is_width_bound_and_vertically_centered(self) -> None:
        page_w, page_h = A4_PORTRAIT

        placement = fit_image(page_w, page_h, 1000, 750)

        assert placement.scale == pytest.approx(page_w / 1000)
        assert placement.width == pytest.approx(page_w)
        assert placement.height == pytest.approx(750 * page_w / 1000)
        assert placement.x == pytest.approx(0)
        assert placement.y == pytest.approx((page_h - placement.height) / 2)

    def test_tall_image_is_height_bound_and_horizontally_centered(self) -> None:
        placement = fit_image(600, 800, 100, 400)

        assert placement.scale == pytest.approx(2.0)
        assert (placement.width, placement.height) == (pytest.approx(200), pytest.approx(800))
        assert placement.x == pytest.approx(200)
        assert placement.y == pytest.approx(0)

    def test_small_image_is_scaled_up_to_fit(self) -> None:
        placement = fit_image(600, 800, 60, 40)

        assert placement.scale == pytest.approx(10.0)
        assert placement.y == pytest.approx((800 - 400) / 2)

    @pytest.mark.parametrize(
        ("img_w", "img_h"),
        [(1000, 750), (400, 300), (600, 800), (1000, 3000), (1, 1)],
    )
    def test_scale_formula_and_centering(self, img_w: int, img_h: int) -> None:
        page_w, page_h = A4_PORTRAIT

        placement = fit_image(page_w, page_h, img_w, img_h)

        assert placement.scale == pytest.approx(min(page_w / img_w, page_h / img_h))
        assert placement.x == pytest.approx((page_w - img_w * placement.scale) / 2)
        assert placement.y == pytest.approx((page_h - img_h * placement.scale) / 2)
        assert placement.width <= page_w + 1e-9
        assert placement.height <= page_h + 1e-9

    @pytest.mark.parametrize(("img_w", "img_h"), [(0, 10), (10, 0), (-5, 10)])
    def test_rejects_degenerate_images(self, img_w: int, img_h: int) -> None:
        with pytest.raises(ValueError, match="Invalid image size"):
            fit_image(100, 100, img_w, img_h)
