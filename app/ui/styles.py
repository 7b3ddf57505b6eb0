# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the Margin Calculator project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
Application Styles and Design Tokens
"""

APP_STYLE = """
<style>
    @import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&family=JetBrains+Mono:wght@400;500;700&display=swap');

    .block-container {
        max-width: 560px;
        padding-top: 3rem !important;
        padding-bottom: 3rem !important;
    }

    /* ========================================== */
    /* DESIGN TOKENS                              */
    /* ========================================== */

    :root {
        --bg-color: #12161f;
        --card-border: rgba(75, 125, 163, 0.35);
        --text-primary: #ecf3fa;
        --text-secondary: #a8b5c8;
        --accent-primary: #4B7DA3;
        --loss-color: #c97b7b;

        --font-primary: 'Inter', sans-serif;
        --font-mono: 'JetBrains Mono', monospace;

        --font-size-sm: 0.75rem;
        --font-size-lg: 1.1rem;
        --font-size-xl: 1.25rem;
        --font-size-3xl: 1.8rem;

        --spacing-sm: 1rem;
        --spacing-md: 1.5rem;

        --radius: 10px;
    }

    .stApp {
        background-color: #0d1117;
        background-image: radial-gradient(circle at 50% -10%, rgba(170, 190, 210, 0.15) 0%, transparent 80%);
        color: var(--text-primary);
        font-family: var(--font-primary);
    }

    h1 {
        font-family: var(--font-mono);
        font-size: var(--font-size-3xl) !important;
        letter-spacing: -0.02em;
    }

    /* Inputs */
    [data-testid="stTextInput"] input {
        font-family: var(--font-mono);
        font-variant-numeric: tabular-nums;
        border-radius: var(--radius);
    }

    /* Summary card */
    .calc-card {
        border: 1px solid var(--card-border);
        border-radius: var(--radius);
        padding: var(--spacing-sm);
        margin-top: var(--spacing-md);
        backdrop-filter: blur(8px);
        box-shadow: 0 4px 24px rgba(0, 0, 0, 0.2);
    }

    .calc-header {
        font-family: var(--font-mono);
        font-size: var(--font-size-lg);
        font-weight: 600;
        margin-bottom: var(--spacing-sm);
    }

    .calc-grid {
        display: grid;
        grid-template-columns: repeat(2, 1fr);
        row-gap: 1rem;
    }

    .calc-item {
        border-left: 1px solid rgba(90, 122, 143, 0.35);
        padding: 0.25rem 0.85rem 0.25rem 1.25rem;
    }

    .calc-label {
        font-size: var(--font-size-sm);
        color: var(--text-secondary);
        text-transform: uppercase;
        letter-spacing: 0.05em;
    }

    .calc-value {
        font-family: var(--font-mono);
        font-size: var(--font-size-xl);
        font-weight: 700;
        font-variant-numeric: tabular-nums;
    }

    .calc-source .calc-label::after {
        content: " \\2022";
        color: var(--accent-primary);
    }

    .calc-loss .calc-value {
        color: var(--loss-color);
    }
</style>
"""
