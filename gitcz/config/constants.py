"""Constants for gitcz configuration.

Contains:
- ALLOWED_SKIP_QUESTIONS: Stages the user may opt out of
- DEFAULT_TYPES: Built-in commit type catalogue
- DEFAULT_TYPE_DISPLAY_SIZE: Number of types visible in the type list
- DEFAULT_CONFIG: Default configuration written by `git-cz init`
"""

ALLOWED_SKIP_QUESTIONS = [
    "scope",
    "body",
    "breaking",
    "footer",
]

DEFAULT_TYPES = [
    {"value": "feat", "name": "feat:     A new feature"},
    {"value": "fix", "name": "fix:      A bug fix"},
    {"value": "docs", "name": "docs:     Documentation only changes"},
    {"value": "style", "name": "style:    Changes that do not affect the meaning of the code"},
    {"value": "refactor", "name": "refactor: A code change that neither fixes a bug nor adds a feature"},
    {"value": "perf", "name": "perf:     A code change that improves performance"},
    {"value": "test", "name": "test:     Adding missing tests or correcting existing tests"},
    {"value": "build", "name": "build:    Changes that affect the build system or dependencies"},
    {"value": "ci", "name": "ci:       Changes to CI configuration files and scripts"},
    {"value": "chore", "name": "chore:    Other changes that don't modify src or test files"},
    {"value": "revert", "name": "revert:   Reverts a previous commit"},
]

DEFAULT_TYPE_DISPLAY_SIZE = 5

CONFIG_DIR_NAME = ".gitcz"
CONFIG_FILE_NAME = "config.yaml"

DEFAULT_CONFIG = {
    "types": DEFAULT_TYPES,
    "messages": {
        "type": "Select the type of change that you're committing",
        "scope": "Enter scope (optional)",
        "ticket_number": "Enter ticket number",
        "subject": "Enter commit subject",
        "body": "Enter commit body (optional)",
        "breaking_confirm": "Are there any breaking changes? (y/N)",
        "breaking_message": "Describe breaking changes",
        "footer": "Enter footer ('word: content' or 'word #content')",
        "confirm_commit": "Commit this message?",
    },
    "skip_questions": [],
    "type_display_size": DEFAULT_TYPE_DISPLAY_SIZE,
    "ticket_number": {
        "enable": False,
        "required": False,
        "prefix": "#",
        "match_pattern": r"\d+",
        "from_branch_name": {
            "enable": True,
            "extract_regexp": r"^.+?/(?P<ticket_number>\d+)([-_]\w+)*$",
        },
    },
}
