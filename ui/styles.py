"""
UI Styles
=========

Brutalist late-80s/early-90s aesthetic for the Valuesort interface,
with dark green accents and index-card styling for the values.
"""

EXERCISE_CSS = """
/* Import IBM Plex Mono for that classic terminal feel */
@import url('https://fonts.googleapis.com/css2?family=IBM+Plex+Mono:wght@400;500;600&display=swap');

/* ========== Base Reset & Theme ========== */
:root {
    --accent-green: #1a4d1a;
    --accent-green-light: #2d6b2d;
    --accent-green-pale: #e8f0e8;
    --cream: #f5f5f0;
    --white: #ffffff;
    --black: #1a1a1a;
    --gray-dark: #3a3a3a;
    --gray-mid: #888888;
    --gray-light: #cccccc;
    --gray-pale: #e8e8e8;
    --shadow: #a0a0a0;
    --danger: #8b0000;
    --warning: #7a5a00;
}

body {
    font-family: "IBM Plex Mono", "Courier New", Courier, monospace;
    background-color: var(--cream);
    color: var(--black);
    margin: 0 auto;
    max-width: 1200px;
    padding: 16px;
}

/* ========== Typography ========== */
.app-header h1 {
    color: var(--accent-green);
    border-bottom: 3px double var(--accent-green);
    margin-bottom: 4px;
}

.subtitle,
.instructions {
    color: var(--gray-dark);
}

/* ========== Buttons ========== */
button,
a.button {
    font-family: inherit;
    font-weight: 500;
    border-radius: 0;
    cursor: pointer;
    padding: 4px 10px;
    text-decoration: none;
}

/* Default button - outset 3D style */
button.secondary,
button.toggle,
button.move,
a.button {
    background-color: var(--gray-light);
    color: var(--black);
    border: 2px outset var(--gray-light);
}

button.secondary:active,
button.move:active {
    border-style: inset;
}

button.toggle.active {
    background-color: var(--accent-green-pale);
    border-style: inset;
}

/* Primary button - green */
button.primary {
    background-color: var(--accent-green);
    color: var(--white);
    border: 2px outset var(--accent-green-light);
}

button.primary:hover {
    background-color: var(--accent-green-light);
}

/* Danger button */
button.danger {
    background-color: var(--danger);
    color: var(--white);
    border: 2px outset #a03030;
}

/* Disabled buttons */
button:disabled {
    opacity: 0.5;
    cursor: not-allowed;
}

#global-controls {
    display: flex;
    flex-wrap: wrap;
    gap: 8px;
    margin-bottom: 16px;
}

/* ========== Notifications ========== */
.notification {
    border: 2px solid var(--gray-dark);
    background-color: var(--white);
    padding: 8px 12px;
    margin-bottom: 12px;
}

.notification.warning {
    border-color: var(--warning);
    color: var(--warning);
}

.notification.error {
    border-color: var(--danger);
    color: var(--danger);
}

/* ========== Columns & Cards ========== */
.columns {
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(220px, 1fr));
    gap: 12px;
    margin-bottom: 16px;
}

.column {
    background-color: var(--gray-pale);
    border: 2px inset var(--gray-light);
    padding: 8px;
}

.column h3 {
    margin-top: 0;
    font-size: 1em;
    text-transform: uppercase;
}

.card {
    background-color: var(--white);
    border: 2px solid var(--black);
    box-shadow: 3px 3px 0 var(--shadow);
    margin-bottom: 10px;
    padding: 8px;
}

.card.custom {
    border-style: dashed;
}

.card-name {
    display: block;
    font-weight: 600;
    color: var(--accent-green);
}

.card-description {
    display: block;
    font-size: 0.85em;
    color: var(--gray-dark);
    cursor: text;
}

.card-actions {
    display: flex;
    flex-wrap: wrap;
    gap: 4px;
    margin-top: 6px;
}

button.move {
    font-size: 0.75em;
}

/* ========== Forms ========== */
input[type="text"] {
    font-family: inherit;
    border: 2px inset var(--gray-light);
    background-color: var(--white);
    padding: 4px 6px;
}

.custom-value,
.final-statement {
    margin-bottom: 12px;
}

.final-statement label {
    display: block;
    margin-bottom: 4px;
}

.final-statement input {
    width: 100%;
    box-sizing: border-box;
}

/* ========== Review ========== */
.values-grid {
    display: grid;
    grid-template-columns: 1fr 1fr;
    gap: 16px;
    margin-bottom: 16px;
}

.review-value-name {
    font-weight: 600;
    margin-right: 8px;
}

.review-value-description {
    color: var(--gray-dark);
}

.statement {
    border-left: 3px solid var(--accent-green);
    padding-left: 8px;
    font-style: italic;
}
"""
