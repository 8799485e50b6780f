"""All magic values live here; no inline literals anywhere else."""

# Upload limits
MAX_FILE_SIZE_MB = 5
MAX_FILE_SIZE_BYTES = MAX_FILE_SIZE_MB * 1024 * 1024
ACCEPTED_IMAGE_TYPES: tuple[str, ...] = (
    "image/jpeg",
    "image/png",
    "image/webp",
    "image/gif",
)

# Image analysis
CLAUDE_VISION_MODEL = "claude-opus-4-6"
OPENAI_VISION_MODEL = "gpt-4o"
VISION_MAX_TOKENS = 64
EMOTION_ANALYSIS_PROMPT = (
    "Analyze the facial expression in this image and identify the primary emotion "
    "being displayed by the person.\n"
    "Respond with only the name of the emotion (e.g., Happy, Sad, Angry, Surprised, "
    "Disgusted, Fearful, Neutral).\n"
    'If no clear face or emotion is discernible, respond with "Could not determine '
    'emotion" or "No clear face detected".'
)

# Error classification: lowercase substrings matched against the SDK error text
API_KEY_ERROR_MARKERS = (
    "api key not valid",
    "invalid x-api-key",
    "incorrect api key",
    "authentication",
    "permission denied",
)
RATE_LIMIT_ERROR_MARKERS = ("quota", "rate limit")
TIMEOUT_ERROR_MARKERS = ("deadline exceeded", "timeout", "timed out")

# User-facing messages
MSG_FILE_TOO_LARGE = f"File is too large. Max size is {MAX_FILE_SIZE_MB}MB."
MSG_INVALID_FILE_TYPE = f"Invalid file type. Accepted types: {', '.join(ACCEPTED_IMAGE_TYPES)}."
MSG_READ_FAILED = "Failed to read file."
MSG_NO_IMAGE_DATA = "No image data to analyze."
MSG_EMPTY_RESPONSE = "AI could not determine an emotion. The response was empty."
MSG_CLIENT_NOT_INITIALIZED = "Vision API client is not initialized. Check API key configuration."
MSG_ERR_API_KEY = "Invalid or missing API key. Please check your configuration."
MSG_ERR_RATE_LIMIT = "API request limit reached. Please try again later."
MSG_ERR_TIMEOUT = "The request to the AI timed out. Please try again."
MSG_ERR_API = "API Error: %s"
MSG_ERR_UNKNOWN = "Failed to analyze emotion due to an unknown API error."
MSG_CLEARER_IMAGE_HINT = (
    "Try uploading a clearer image of a face, or ensure the face is well-lit and visible."
)

# Emotion presentation: first matching keyword group wins
DEFAULT_EMOTION_EMOJI = "🤔"
EMOTION_EMOJI_GROUPS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("happy", "joy"), "😊"),
    (("sad", "sorrow"), "😢"),
    (("angry", "rage"), "😠"),
    (("surprised", "astonished"), "😮"),
    (("neutral",), "😐"),
    (("fear",), "😨"),
    (("disgust",), "🤢"),
    (("contempt",), "😒"),
    (("love",), "😍"),
)
CLEARER_IMAGE_MARKERS = ("could not determine", "no clear face")

# Sessions
SESSION_COOKIE_NAME = "emotion_session"
MAX_SESSIONS = 256

# Web
APP_TITLE = "Emotion Detector AI"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = "8000"

# Log messages
MSG_SERVER_STARTING = "Starting Emotion Detector on %s:%s"
MSG_API_KEY_MISSING = (
    "Vision API key is not found. Set ANTHROPIC_API_KEY or OPENAI_API_KEY to enable analysis."
)
MSG_USING_BACKEND = "Vision backend: %s"
MSG_UPLOAD_REJECTED = "Upload rejected (%s): %s"
MSG_UPLOAD_ACCEPTED = "Upload accepted: %s (%d bytes, %s)"
MSG_UPLOAD_READ_ERROR = "Upload read failed for %s: %s"
MSG_UPLOAD_EMPTY = "Upload %s was empty"
MSG_ANALYSIS_IN_FLIGHT = "Analysis already in flight, ignoring request"
MSG_ANALYSIS_DONE = "✓ Analysis done (%.1fs): %s"
MSG_ANALYSIS_FAILED = "✗ Analysis failed (%.1fs): %s"
MSG_ANALYSIS_DISCARDED = "Analysis result dropped (%.1fs): session was cleared"
MSG_INFERENCE_ERROR = "Error analyzing image emotion with vision API"
MSG_SESSION_EVICTED = "Evicted session %s (store full)"
