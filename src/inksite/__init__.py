"""Static-site builder for the white_silence_black_ink site."""

__version__ = "0.1.0"
