import os

SECRET_KEY = os.environ.get("SECRET_KEY", "schan-secret-key")
DB_PATH = os.environ.get("DB_PATH", "schan.db")
UPLOAD_DIR = os.environ.get("UPLOAD_DIR", os.path.join(os.path.dirname(os.path.abspath(__file__)), "public", "uploads"))
UPLOAD_URL_PREFIX = "/uploads"
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# Server Configuration
DEFAULT_HOST = os.environ.get("HOST", "0.0.0.0")
DEFAULT_PORT = int(os.environ.get("PORT", "3000"))

# Retention caps
MAX_THREADS_PER_BOARD = 50
MAX_POSTS_PER_THREAD = 500

# Identifiers are drawn from [0, MAX_POST_ID)
MAX_POST_ID = 10_000_000

# Captcha Settings
CAPTCHA_MIN_LENGTH = 3
RESERVED_NAMES = ("Sam", "NodeMixaholic", "Kuromi", "Sparksammy")
RESERVED_NAME_CAPTCHA_SUFFIX = "42"

# Upload Settings
MAX_UPLOAD_BYTES = 5 * 1024 * 1024  # 5MB
ALLOWED_IMAGE_TYPES = r"jpeg|jpg|png|gif"

# Post Defaults
DEFAULT_SUBJECT = "No subject"
DEFAULT_NAME = "Anonymous"

# Store keys
BOARDS_KEY = "boards"
THREADS_KEY_PREFIX = "threads_"

# Flash Messages
MSG_INVALID_CAPTCHA = "Invalid captcha. Please try again."
MSG_EMPTY_POST = "Post must contain an image or text"
MSG_INVALID_IMAGE = "Only image files are allowed!"
MSG_IMAGE_TOO_LARGE = "File too large (max 5MB)"
MSG_BOARD_NOT_FOUND = "Board not found"
MSG_THREAD_NOT_FOUND = "Thread not found"
MSG_THREAD_CREATED = "Thread created successfully"
MSG_REPLY_POSTED = "Reply posted successfully"

# HTTP Status Codes
HTTP_NOT_FOUND = 404
HTTP_INTERNAL_SERVER_ERROR = 500

# Board page preview
PREVIEW_REPLIES = 3

DEFAULT_BOARDS = [
    {"id": "b", "name": "Random", "description": "Random discussion"},
    {"id": "a", "name": "Anime", "description": "Anime & Manga discussion"},
    {"id": "sanrio", "name": "Sanrio", "description": "Discussion about Sanrio characters, cartoons, products, and their universes"},
    {"id": "vocal", "name": "Vocaloid-like", "description": "Discussion about Vocal and Singing software, characters, songs, products, and their universes"},
    {"id": "pol", "name": "Politics", "description": "Political discussion"},
    {"id": "g", "name": "Technology", "description": "Technology discussion"},
    {"id": "p", "name": "Photography", "description": "Photography discussion"},
    {"id": "hen", "name": "*NSFW* Hentai", "description": "*NSFW* First-party porn of Anime and Manga characters"},
    {"id": "r34", "name": "*NSFW* r34", "description": "*NSFW* If it exists, there's porn of it. Third-party porn of cartoons, anime, and manga."},
    {"id": "coom", "name": "*NSFW* Coomer Zone", "description": "*NSFW* Porn of anything and everything legal, including real people."},
    {"id": "wtf", "name": "*NSFW* WTF", "description": '*NSFW* Shit that makes you mad, sad, or just makes you go "wtf"'},
    {"id": "foss", "name": "Open Source", "description": "Talk about open source projects and software"},
    {"id": "sci", "name": "Science", "description": "Science discussion"},
    {"id": "art", "name": "Art", "description": "Art discussion"},
    {"id": "moozie", "name": "Music", "description": "Music discussion"},
    {"id": "srcleak", "name": "Source Code Leaks", "description": "Leaks of source code, programming documentation, and other technical documents"},
    {"id": "leak", "name": "Random Leaks", "description": "Leaks of anything and everything, including but not limited to source code."},
    {"id": "food", "name": "Food", "description": "Food discussion"},
    {"id": "game", "name": "Video Games", "description": "Video Game discussion"},
    {"id": "appl", "name": "Apple", "description": "Talk about the joys of Apple products, services, and the company."},
]
