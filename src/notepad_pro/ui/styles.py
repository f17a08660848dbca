"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.
"""

APP_CSS = """
/* ============================================
   CSS Variables - Design Tokens
   ============================================ */
$card-border: round $border;
$card-border-focus: round $primary;

Screen {
    background: $background;
}

/* ============================================
   Login Screen
   ============================================ */
LoginScreen {
    align: center middle;
}

#login-card {
    width: 60;
    height: auto;
    padding: 1 2;
    background: $surface;
    border: tall $primary 60%;

    Button {
        width: 100%;
        margin-top: 1;
    }
}

#login-title {
    text-style: bold;
    color: $primary;
    padding-bottom: 1;
}

#login-heading {
    color: $text-muted;
    padding-bottom: 1;
}

/* ============================================
   Route Views
   ============================================ */
#routes {
    height: 1fr;
}

#routes > * {
    height: 100%;
    padding: 0 1;
    border: $card-border;
    border-title-color: $primary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
}

.section-title {
    text-style: bold;
    margin: 1 0 0 0;
}

#quick-actions, #editor-actions, #search-chips {
    height: auto;

    Button {
        margin-right: 1;
    }
}

.note-list {
    height: 1fr;
}

/* ============================================
   Note Cards
   ============================================ */
NoteCard {
    height: auto;
    margin-bottom: 1;
    padding: 0 1;
    background: $surface;
    border: $card-border;

    &:hover {
        border: $card-border-focus;
    }

    &.-locked {
        background: $panel;
        color: $text-muted;
    }
}

.note-title {
    text-style: bold;
}

.note-snippet {
    max-height: 2;
}

.note-tags {
    height: auto;
}

.tag-chip {
    width: auto;
    margin-right: 1;
    padding: 0 1;
    background: $primary 20%;
    color: $primary;
}

.note-timestamp {
    color: $text-muted;
}

.locked-notice {
    margin: 1 0;
    padding: 1 2;
    background: $panel;
    border: round $warning 60%;
    color: $warning;
}

#search-empty {
    color: $text-muted;
    padding: 1 0;
}

.chip {
    min-width: 10;
}

/* ============================================
   Editor
   ============================================ */
#editor-form {
    height: 1fr;
}

#note-content {
    height: 1fr;
    margin: 1 0;
}

/* ============================================
   Settings
   ============================================ */
.settings-row {
    height: auto;
    margin-bottom: 1;
    padding: 0 1;
    background: $surface;
    border: $card-border;
}

.settings-icon {
    width: 3;
}

.settings-text {
    height: auto;
}

.settings-title {
    text-style: bold;
}

.toggle-title {
    width: 1fr;
    padding-top: 1;
}

.settings-subtitle {
    color: $text-muted;
}

#logout {
    width: 100%;
}

/* ============================================
   Log Panel
   ============================================ */
#log-panel {
    height: 10;
    background: $panel;
    border: round $secondary 60%;
    border-title-color: $secondary;
    border-subtitle-color: $text-muted;
    padding: 0 1;
}

/* ============================================
   Bottom Navigation
   ============================================ */
#nav-bar {
    dock: bottom;
    height: 3;
    margin-bottom: 1;
    background: $panel;
}

.nav-button {
    width: 1fr;
    border: none;
    background: $panel;

    &.-active {
        background: $primary 30%;
        color: $primary;
        text-style: bold;
    }
}
"""
