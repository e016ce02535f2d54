import numpy as np
import pytest

from gifdiff.errors import ValidationError
from gifdiff.stages.dilator import dilate
from gifdiff.stages.loader import ImagePair
from gifdiff.stages.quantizer import quantize
from gifdiff.stages.renderer import BACKGROUND_INDEX, render_diff, render_frames

from helpers import noise, solid, square, with_pixel


def _pair(source, target):
    return ImagePair(source=source, target=target, size=source.size, mode="RGB")


def _region(source, target, radius=10):
    diff = np.asarray(source) != np.asarray(target)
    return dilate(diff.any(axis=2), radius)


class TestQuantize:
    def test_palette_never_exceeds_256_colours(self):
        result = quantize(noise((64, 64)))
        assert 0 < len(result.palette) <= 256
        assert result.palette_image.mode == "P"

    def test_few_colours_are_kept_exactly(self):
        image = with_pixel(solid((10, 10)), (5, 5), (255, 255, 255))
        palette = quantize(image).palette
        assert (0, 0, 0) in palette.colors
        assert (255, 255, 255) in palette.colors

    def test_smaller_palette_on_request(self):
        assert len(quantize(noise((32, 32)), colors=16).palette) <= 16

    @pytest.mark.parametrize("colors", [0, 257])
    def test_palette_size_out_of_range(self, colors):
        with pytest.raises(ValueError):
            quantize(solid((2, 2)), colors=colors)


class TestRenderFrames:
    def setup_method(self):
        self.source = solid((40, 40))
        self.target = with_pixel(self.source, (20, 20), (255, 255, 255))
        self.region = _region(self.source, self.target)
        self.frames = render_frames(_pair(self.source, self.target), self.region)

    def test_frame_order_and_modes(self):
        assert [frame.key for frame in self.frames] == ["source", "target", "diff"]
        assert all(frame.image.mode == "P" for frame in self.frames)
        assert all(frame.image.size == (40, 40) for frame in self.frames)

    def test_source_and_target_frames_reproduce_inputs(self):
        assert np.array_equal(
            np.asarray(self.frames.source.image.convert("RGB")), np.asarray(self.source)
        )
        assert np.array_equal(
            np.asarray(self.frames.target.image.convert("RGB")), np.asarray(self.target)
        )

    def test_diff_frame_shares_target_palette(self):
        assert self.frames.diff.palette == self.frames.target.palette
        assert self.frames.diff.image.getpalette() == self.frames.target.image.getpalette()

    def test_diff_frame_only_paints_the_region(self):
        diff = np.asarray(self.frames.diff.image)
        target = np.asarray(self.frames.target.image)
        inside = square((20, 20), 10, (40, 40))
        for y in range(40):
            for x in range(40):
                if (x, y) in inside:
                    assert diff[y, x] == target[y, x]
                else:
                    assert diff[y, x] == BACKGROUND_INDEX

    def test_diff_frame_shows_the_changed_pixel(self):
        assert self.frames.diff.image.convert("RGB").getpixel((20, 20)) == (255, 255, 255)

    def test_region_size_mismatch_is_rejected(self):
        other = _region(solid((8, 8)), with_pixel(solid((8, 8)), (1, 1), (9, 9, 9)))
        with pytest.raises(ValidationError):
            render_diff(self.frames.target.image, other)
