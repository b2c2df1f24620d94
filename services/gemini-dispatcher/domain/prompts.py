"""Prompt templates, one per action.

Every builder is a pure function of its payload: the same payload always
yields the same prompt text.
"""

import json
from typing import Any

from domain.models import Agent, EmailFormData

COPYWRITER_INSTRUCTION = "You are an expert insurance marketing copywriter."
EMAIL_BODY_INSTRUCTION = (
    "You are an expert insurance email copywriter. Generate ONLY pure HTML code "
    "without any explanatory text or comments. Do not include a title/subject "
    "heading since that will be handled separately."
)
PROSE_INSTRUCTION = "You are an expert insurance copywriter."
DATA_EXTRACTION_INSTRUCTION = "You are a data extraction specialist."
SALES_INSTRUCTION = "You are an insurance sales specialist."
RATE_CHANGE_INSTRUCTION = (
    "You are a customer service specialist for an insurance company. Provide only "
    "the customer-facing text without any additional commentary."
)

PROMPT_FROM_PDF = (
    "Extract policy holder name, recipient name, and create a brief summary prompt "
    'from this PDF. Return JSON: {"policyHolder": "...", "recipientName": "...", '
    '"customPrompt": "..."}'
)
QUOTE_FROM_PDF = (
    "Extract home insurance quote information from this PDF. Return JSON with "
    'fields like: {"recipientName": "...", "policyNumber": "...", "premium": "...", '
    "etc}"
)
AUTO_QUOTE_FROM_PDF = (
    "Extract auto insurance quote information from this PDF. "
    "Return JSON with relevant fields."
)
RENEWAL_FROM_PDF = (
    "Extract renewal information from this insurance PDF. "
    "Return JSON with relevant fields."
)
NEW_POLICY_FROM_PDF = (
    "Extract new policy information from this insurance PDF. "
    "Return JSON with relevant fields."
)
CANCELLATIONS_FROM_PDF = (
    "Extract cancellation data from this PDF. Return JSON array of cancellations."
)
RECEIPT_FROM_PDF = (
    "Extract receipt information from this PDF. Return JSON with relevant fields."
)


def _optional_line(label: str, value: str) -> str:
    return f"{label}: {value}" if value else ""


def subject_lines_prompt(form_data: EmailFormData) -> str:
    return (
        "Generate 3 compelling email subject lines for an insurance email with "
        "these details:\n"
        f"Campaign: {form_data.email_campaign}\n"
        f"Recipient: {form_data.recipient_name}\n"
        f"{_optional_line('Additional context', form_data.custom_prompt)}\n"
        "\n"
        'Return as JSON array: ["subject1", "subject2", "subject3"]'
    )


def preheaders_prompt(form_data: EmailFormData) -> str:
    return (
        "Generate 3 preheader texts for an insurance email with these details:\n"
        f"Campaign: {form_data.email_campaign}\n"
        f"Recipient: {form_data.recipient_name}\n"
        f"{_optional_line('Additional context', form_data.custom_prompt)}\n"
        "\n"
        'Return as JSON array: ["preheader1", "preheader2", "preheader3"]'
    )


def email_body_prompt(form_data: EmailFormData, agent: Agent) -> str:
    return (
        "Generate ONLY the HTML email body content for:\n"
        f"Campaign: {form_data.email_campaign}\n"
        f"Recipient: {form_data.recipient_name}\n"
        f"Agent: {agent.name} ({agent.email}, {agent.phone})\n"
        f"{_optional_line('Custom instructions', form_data.custom_prompt)}\n"
        "\n"
        "IMPORTANT FORMATTING RULES:\n"
        "1. Return ONLY the HTML code without any explanations, comments, or "
        "instructions\n"
        "2. Do NOT include a subject line or title heading at the top (like "
        "<h1>Subject</h1>)\n"
        "3. Start directly with the greeting or first paragraph\n"
        '4. Do not include phrases like "Key improvements" or "Before sending"\n'
        "5. Just pure HTML email body content"
    )


def quote_prose_prompt(form_data: EmailFormData, line_of_business: str) -> str:
    """
    Builds the greeting/intro/CTA prompt for a quote email.

    Args:
        form_data: Campaign details.
        line_of_business: Article and product, e.g. "a home" or "an auto".
    """
    return (
        f"Generate personalized prose for {line_of_business} insurance quote email:\n"
        f"Recipient: {form_data.recipient_name}\n"
        f"{_optional_line('Context', form_data.custom_prompt)}\n"
        "\n"
        'Return JSON with: { "greeting": "...", "intro": "...", "ctaText": "..." }'
    )


def receipt_from_text_prompt(text: str) -> str:
    return (
        f'Extract receipt information from this text: "{text}". '
        "Return JSON with relevant fields."
    )


def change_from_text_prompt(text: str) -> str:
    return (
        f'Extract policy change information from this text: "{text}". '
        "Return JSON with relevant fields."
    )


def opportunities_prompt(form_data: dict[str, Any]) -> str:
    """Embeds the caller's form data as sent: key order and nulls are kept."""
    customer_data = json.dumps(
        form_data,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return (
        "Based on this customer data, suggest cross-sell/upsell opportunities:\n"
        f"{customer_data}\n"
        "\n"
        "Return JSON array of opportunities: "
        '[{"title": "...", "description": "...", "priority": "high/medium/low"}]'
    )


def _format_amount(value: str | int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def rate_change_prompt(
    previous_premium: str | int | float, new_premium: str | int | float
) -> str:
    return (
        f"Explain a premium change from ${_format_amount(previous_premium)} to "
        f"${_format_amount(new_premium)} in a friendly, understanding way.\n"
        "\n"
        "IMPORTANT: Return ONLY the explanation text that will be shown to the "
        "customer. Do not include any meta-commentary, suggestions, or notes to me. "
        "Just the customer-facing explanation."
    )
