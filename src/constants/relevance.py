LOW_VALUE_TERMS = frozenset({
    "best", "top", "great", "good", "new", "latest", "free", "premium",
    "pro", "plus", "lite", "one", "two", "three",
})

TIME_BOUND_TERMS = frozenset({
    "day", "days", "week", "weeks", "month", "months", "year", "years",
    "trial", "limited", "offer", "sale", "deal", "deals", "discount",
    "updated", "version",
})

CORE_INTENT_VERBS = frozenset({
    "learn", "speak", "study", "master", "practice", "improve", "understand",
    "read", "write", "listen", "teach", "track", "plan", "edit", "create",
    "play", "watch", "manage", "build", "design", "train", "meditate",
})

DOMAIN_NOUNS = frozenset({
    "lesson", "lessons", "course", "courses", "class", "classes", "grammar",
    "vocabulary", "pronunciation", "conversation", "fluency", "language",
    "languages", "learning", "app", "application", "tutorial", "training",
    "education", "skill", "skills", "method", "techniques", "guide",
    "tracker", "planner", "editor", "workout", "workouts", "game", "games",
    "budget", "habit", "habits", "journal", "recipes", "music", "photo",
    "video", "notes",
})

RELEVANCE_MAX = 3
