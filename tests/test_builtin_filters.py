import numpy as np
import pytest

pytest.importorskip("OpenImageIO", reason="OpenImageIO is required for filter tests", exc_type=ImportError)

from shaderlab.oiio import OiioAdapter
from shaderlab.processing import CATEGORY_BLUR, INPUT_IMAGE_KEY, default_registry
from shaderlab.processing.builtin_filters import BUILTIN_FILTERS
from shaderlab.services.catalog import load_catalog


def _gradient(height=16, width=16, channels=3):
    ys, xs = np.mgrid[0:height, 0:width].astype(np.float32)
    planes = [xs / (width - 1), ys / (height - 1), 1.0 - xs / (width - 1), np.full_like(xs, 0.75)]
    return np.stack(planes[:channels], axis=2).astype(np.float32)


def _run(name, pixels, **values):
    image_filter = default_registry().create_filter(name)
    image_filter.set_value(OiioAdapter.from_array(pixels), INPUT_IMAGE_KEY)
    for key, value in values.items():
        image_filter.set_value(value, key)
    output = image_filter.output_image
    assert output is not None, f"{name} produced no output"
    return OiioAdapter.to_array(output)


@pytest.mark.parametrize("name", [d.name for d in BUILTIN_FILTERS])
def test_every_builtin_keeps_image_size(name):
    pixels = _gradient()
    out = _run(name, pixels)
    assert out.shape[:2] == pixels.shape[:2]


def test_default_registry_blur_category():
    names = default_registry().filter_names(CATEGORY_BLUR)
    assert names[:2] == ["GaussianBlur", "BoxBlur"]
    assert "Pixellate" not in names


def test_default_catalog_discovers_blur_filters():
    catalog = load_catalog()
    ids = [s.id for s in catalog]
    assert ids[0] == "Pixellate"
    assert "GaussianBlur" in ids and "MedianFilter" in ids
    median = next(s for s in catalog if s.id == "MedianFilter")
    # No registry maximum: default + 10
    assert median.get_parameter("width").range == (1.0, 13.0)
    assert median.description == "Median"


def test_unsharp_mask_kernel_is_not_a_slider():
    catalog = load_catalog(seed=[], categories=["sharpen"])
    assert [p.name for p in catalog[0].parameters] == ["radius", "intensity"]


def test_pixellate_averages_blocks():
    pixels = _gradient(4, 4)
    out = _run("Pixellate", pixels, scale=2)
    for y in (0, 2):
        for x in (0, 2):
            block = out[y:y + 2, x:x + 2]
            np.testing.assert_allclose(block, np.broadcast_to(block[0, 0], block.shape), atol=1e-6)
            np.testing.assert_allclose(block[0, 0], pixels[y:y + 2, x:x + 2].mean(axis=(0, 1)), atol=1e-6)


def test_pixellate_handles_partial_blocks():
    out = _run("Pixellate", _gradient(5, 7), scale=3)
    assert out.shape == (5, 7, 3)


def test_sepia_zero_intensity_is_identity():
    pixels = _gradient()
    np.testing.assert_allclose(_run("SepiaTone", pixels, intensity=0.0), pixels, atol=1e-6)


def test_invert_keeps_alpha():
    pixels = _gradient(channels=4)
    out = _run("ColorInvert", pixels)
    np.testing.assert_allclose(out[:, :, :3], 1.0 - pixels[:, :, :3], atol=1e-6)
    np.testing.assert_allclose(out[:, :, 3], pixels[:, :, 3], atol=1e-6)


def test_threshold_is_binary():
    out = _run("ColorThreshold", _gradient(), threshold=0.5)
    assert set(np.unique(out)) <= {0.0, 1.0}


def test_noir_is_grey():
    out = _run("PhotoEffectNoir", _gradient())
    np.testing.assert_allclose(out[:, :, 0], out[:, :, 1])
    np.testing.assert_allclose(out[:, :, 1], out[:, :, 2])


def test_gamma_power_one_is_identity():
    pixels = _gradient()
    np.testing.assert_allclose(_run("GammaAdjust", pixels, power=1.0), pixels, atol=1e-6)


def test_gaussian_blur_smooths():
    pixels = np.zeros((15, 15, 3), dtype=np.float32)
    pixels[7, 7] = 1.0
    out = _run("GaussianBlur", pixels, radius=2.0)
    assert out[7, 7, 0] < 1.0
    assert out[7, 8, 0] > 0.0


def test_zero_radius_blur_is_identity():
    pixels = _gradient()
    np.testing.assert_allclose(_run("GaussianBlur", pixels, radius=0.0), pixels)
