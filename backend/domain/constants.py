# Edit suggestion status
SUGGESTION_PENDING = "pending"
SUGGESTION_APPROVED = "approved"
SUGGESTION_REJECTED = "rejected"

SUGGESTION_STATUSES = (SUGGESTION_PENDING, SUGGESTION_APPROVED, SUGGESTION_REJECTED)
# PATCH /api/edit-suggestions/{id} で受け付けるのはこの2つのみ
REVIEW_STATUSES = (SUGGESTION_APPROVED, SUGGESTION_REJECTED)

# Activity feed item types
ACTIVITY_SONG = "song"
ACTIVITY_LYRICS = "lyrics"
ACTIVITY_SUGGESTION = "suggestion"

# Paging defaults
DEFAULT_SONGS_LIMIT = 20
DEFAULT_POPULAR_LIMIT = 10
DEFAULT_SEARCH_LIMIT = 20
DEFAULT_ACTIVITY_LIMIT = 10
MAX_PAGE_SIZE = 100

MIN_SEARCH_QUERY_LENGTH = 2

# 主キーは 64bit 整数 (これを超える id は DB に渡す前に 400 にする)
MAX_ROW_ID = 2**63 - 1
