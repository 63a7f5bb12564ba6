"""
Default configuration values for videotoken.

Note: The oEmbed endpoint and thumbnail timeout can be overridden through
environment variables, see config/loader.py.
"""

# Maximum token length in characters (Unicode code points)
MAX_TOKEN_LENGTH = 32

# Timeout (seconds) for the Vimeo thumbnail lookup; None means no timeout
THUMBNAIL_TIMEOUT: float | None = None

USER_AGENT = "videotoken/1.0"
