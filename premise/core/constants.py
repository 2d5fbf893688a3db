"""
Application-wide constants.

Column display names and size limits shared by the model mixins.
"""

# ========================================
# Display Names
# ========================================

DISPLAY_ID = "Unique Identifier"
DISPLAY_CREATED_ON = "Created On"
DISPLAY_CREATED_BY = "Created By"
DISPLAY_MODIFIED_ON = "Modified On"
DISPLAY_MODIFIED_BY = "Modified By"

# ========================================
# Column Limits
# ========================================

ACTOR_MAX_LENGTH = 255
"""Maximum length of the created_by / modified_by columns."""

# ========================================
# Logging
# ========================================

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
