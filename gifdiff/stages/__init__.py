from .loader import ImagePair, load_pair, read_dimensions, decode_image
from .detector import find_differences
from .dilator import DifferenceSet, dilate
from .quantizer import Palette, QuantizedImage, quantize
from .renderer import Frame, RenderedFrames, render_frames
from .encoder import build_animation, encode_animation

__all__ = [
    "ImagePair",
    "load_pair",
    "read_dimensions",
    "decode_image",
    "find_differences",
    "DifferenceSet",
    "dilate",
    "Palette",
    "QuantizedImage",
    "quantize",
    "Frame",
    "RenderedFrames",
    "render_frames",
    "build_animation",
    "encode_animation",
]
