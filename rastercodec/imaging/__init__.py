"""PPM and TGA image encoders."""

from rastercodec.imaging.frame import Frame
from rastercodec.imaging.framebuffer import ACCEPTED_BPP, PPM, TGA, validate_framebuffer
from rastercodec.imaging.ppm import build_ppm_header, encode_ppm
from rastercodec.imaging.reorder import to_tga_order
from rastercodec.imaging.rle import Packet, encode_rle, iter_packets
from rastercodec.imaging.tga import build_tga_header, encode_tga
from rastercodec.imaging.writer import encode, format_for_path, save_frame, save_image

__all__ = [
    "ACCEPTED_BPP",
    "Frame",
    "PPM",
    "Packet",
    "TGA",
    "build_ppm_header",
    "build_tga_header",
    "encode",
    "encode_ppm",
    "encode_rle",
    "encode_tga",
    "format_for_path",
    "iter_packets",
    "save_frame",
    "save_image",
    "to_tga_order",
    "validate_framebuffer",
]
