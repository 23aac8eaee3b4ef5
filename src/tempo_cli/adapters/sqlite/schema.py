"""SQLite schema definitions for the local tempo database.

Tags, subtasks and energy checks are small ordered lists that are always
read together with their owner, so they are stored as JSON text columns.
Timestamps are ISO-8601 strings.
"""

CREATE_TASKS_TABLE = """
CREATE TABLE IF NOT EXISTS tasks (
    id TEXT PRIMARY KEY,
    type TEXT NOT NULL DEFAULT 'task',
    title TEXT NOT NULL,
    description TEXT,
    content TEXT,
    tags TEXT NOT NULL DEFAULT '[]',
    priority TEXT NOT NULL DEFAULT 'medium',
    size TEXT,
    energy TEXT,
    due_date TEXT,
    created_at TEXT NOT NULL,
    updated_at TEXT,
    completed INTEGER NOT NULL DEFAULT 0,
    completed_at TEXT,
    archived INTEGER NOT NULL DEFAULT 0,
    archived_at TEXT,
    subtasks TEXT NOT NULL DEFAULT '[]',
    CHECK (type IN ('task', 'question', 'idea', 'link')),
    CHECK (priority IN ('low', 'medium', 'high', 'urgent')),
    CHECK ((archived = 1) = (archived_at IS NOT NULL))
)
"""

CREATE_DAILY_NOTES_TABLE = """
CREATE TABLE IF NOT EXISTS daily_notes (
    date TEXT PRIMARY KEY,
    intention TEXT,
    notebook TEXT,
    energy_checks TEXT NOT NULL DEFAULT '[]'
)
"""

CREATE_TASKS_DUE_DATE_INDEX = (
    "CREATE INDEX IF NOT EXISTS idx_tasks_due_date ON tasks(due_date)"
)
CREATE_TASKS_STATE_INDEX = (
    "CREATE INDEX IF NOT EXISTS idx_tasks_state ON tasks(completed, archived)"
)

ALL_INDEXES = [
    CREATE_TASKS_DUE_DATE_INDEX,
    CREATE_TASKS_STATE_INDEX,
]
