# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the Margin Calculator project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
Reusable UI Components
"""

from html import escape

from calculators.margin_models import DisplayResult, Field

FIELD_LABELS = {
    Field.COST: "Cost",
    Field.PRICE: "Price",
    Field.PROFIT: "Profit",
    Field.MARGIN: "Margin (%)",
}

FIELD_PLACEHOLDERS = {
    Field.COST: "Enter cost amount",
    Field.PRICE: "Enter selling price",
    Field.PROFIT: "Enter profit amount",
    Field.MARGIN: "Enter margin percentage",
}

# Display order of the form
FORM_ORDER = (Field.COST, Field.PRICE, Field.PROFIT, Field.MARGIN)


def render_result_summary(result: DisplayResult, title="Result"):
    """
    Render a computed result as a single HTML card.

    Returns an empty string when the result carries an error, since its
    values are only echoed input.
    Source fields get a marker; a negative profit is styled as a loss.
    """
    if result.has_error:
        return ""

    items_html = ""
    for field in FORM_ORDER:
        value = result.get(field)
        classes = ["calc-item"]
        if field in result.sources:
            classes.append("calc-source")
        if field == Field.PROFIT and value.strip().startswith("-"):
            classes.append("calc-loss")

        items_html += f'<div class="{" ".join(classes)}">'
        items_html += f'<div class="calc-label">{FIELD_LABELS[field]}</div>'
        items_html += f'<div class="calc-value">{escape(value)}</div>'
        items_html += '</div>'

    # Flatten string to avoid Markdown code block interpretation
    html = '<div class="calc-card">'
    if title:
        html += f'<div class="calc-header">{escape(title)}</div>'
    html += f'<div class="calc-grid">{items_html}</div>'
    html += '</div>'

    return html
