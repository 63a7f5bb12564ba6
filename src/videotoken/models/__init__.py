"""
Data models for videotoken.
"""

from videotoken.models.video_token import VideoToken

__all__ = [
    "VideoToken",
]
