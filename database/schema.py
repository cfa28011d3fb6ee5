# ======================= DECKS ==========================

deck_schema = '''
    CREATE TABLE IF NOT EXISTS decks (
        id INTEGER PRIMARY KEY,
        name TEXT
    )
'''

# ======================= CARDS ==========================

flashcard_schema = '''
    CREATE TABLE IF NOT EXISTS flashcards (
        id INTEGER PRIMARY KEY,
        deck_id INTEGER,
        front TEXT,
        back TEXT
    )
'''

# ======================= SCHEDULING =====================

flashcard_meta_schema = '''
    CREATE TABLE IF NOT EXISTS flashcard_meta (
        question_id INTEGER,
        -- ISO dates (YYYY-MM-DD), compared as text
        added DATE,
        next DATE,
        level INTEGER
    )
'''

# ======================= REVIEW LOG =====================

flashcard_log_schema = '''
    CREATE TABLE IF NOT EXISTS flashcard_log (
        question_id INTEGER,
        answer BOOLEAN
    )
'''
