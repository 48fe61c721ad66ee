"""
UI Styles module
Defines custom CSS for the dashboard (flat cards, trend colours, badges).
"""

TREND_COLORS = {
    "up": "var(--color-positive)",
    "down": "var(--color-negative)",
    "neutral": "var(--color-neutral)",
}

MOMENTUM_COLORS = {
    "high": "var(--color-positive)",
    "medium": "var(--color-warning)",
    "low": "var(--color-neutral)",
}

VERDICT_COLORS = {
    "Buy": "var(--color-positive)",
    "Sell": "var(--color-negative)",
    "Hold": "var(--color-warning)",
    "Neutral": "var(--color-warning)",
}


def get_custom_css() -> str:
    """Returns the custom CSS for the application."""
    return """
<style>
    :root {
        --color-bg-card: #0f172a;
        --color-bg-inset: #020617;
        --color-border: #334155;
        --color-text-primary: #f8fafc;
        --color-text-secondary: #cbd5e1;
        --color-text-muted: #64748b;
        --color-accent: #3b82f6;
        --color-positive: #10b981; /* emerald-500 */
        --color-negative: #f43f5e; /* rose-500 */
        --color-warning: #eab308;  /* yellow-500 */
        --color-neutral: #94a3b8;
        --radius-md: 8px;
        --radius-lg: 12px;
    }

    .pulse-card {
        background-color: var(--color-bg-card);
        border: 1px solid var(--color-border);
        border-radius: var(--radius-lg);
        padding: 1.25rem;
        margin-bottom: 1rem;
    }

    .pulse-card h4 {
        margin: 0 0 0.75rem 0;
        color: var(--color-text-primary);
    }

    .pulse-label {
        font-size: 0.85rem;
        color: var(--color-text-muted);
        margin-bottom: 0.25rem;
    }

    .pulse-value {
        font-size: 1.6rem;
        font-weight: 700;
        color: var(--color-text-primary);
    }

    .pulse-text {
        color: var(--color-text-secondary);
        line-height: 1.6;
    }

    .pulse-badge {
        display: inline-block;
        padding: 0.15rem 0.6rem;
        border-radius: 999px;
        font-size: 0.75rem;
        font-weight: 700;
        text-transform: uppercase;
        letter-spacing: 0.05em;
        color: white;
    }

    .pulse-industry {
        background-color: var(--color-bg-inset);
        border: 1px solid var(--color-border);
        border-radius: var(--radius-md);
        padding: 0.75rem 1rem;
        margin-bottom: 0.75rem;
    }

    .pulse-skeleton {
        background-color: var(--color-bg-card);
        border-radius: var(--radius-lg);
        height: 8rem;
        margin-bottom: 1rem;
        animation: pulse-blink 1.5s ease-in-out infinite;
    }

    @keyframes pulse-blink {
        0%, 100% { opacity: 1; }
        50% { opacity: 0.4; }
    }

    .pulse-source a {
        font-size: 0.8rem;
        color: var(--color-accent);
        text-decoration: none;
    }
</style>
"""
