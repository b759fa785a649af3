"""
cutcat - cut time ranges out of a video and join them back together

This package:
- Re-encodes the input once into a fixed resolution/bitrate master
- Extracts every configured range from the master in parallel
- Joins the extracted segments, in configuration order, into one output

All media work is delegated to ffmpeg.
"""

__version__ = "0.1.0"
