# SPDX-License-Identifier: GPL-3.0-or-later

APP_ID = 'com.github.ferry.SimpleNotes'
APP_NAME = 'SimpleNotes'
DATA_DIR_NAME = 'simplenotes'

# Key-value storage
STORAGE_KEY = 'notes_list'
KEYFILE_NAME = 'notes.ini'
KEYFILE_GROUP = 'notes'

# dd MMMM yyyy HH:mm
TIMESTAMP_FORMAT = '%d %B %Y %H:%M'

LOG_FILE_NAME = 'simplenotes.log'
