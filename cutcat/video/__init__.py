"""ffmpeg command construction, segment extraction and concatenation"""
