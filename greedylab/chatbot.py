"""A keyword-driven shop assistant chatbot."""

from __future__ import annotations

import sys
from collections.abc import Sequence

BOT_NAME = "ShopBot"
FAREWELL = "Thank you for visiting. Have a great day!"
FALLBACK = "I'm sorry, I didn't understand that. Could you please rephrase?"

# Checked in order; the first rule with a matching keyword answers.
_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("price", "cost"), "Our prices vary by product. Could you tell me which item you're interested in?"),
    (("refund", "return"), "You can return any item within 30 days for a full refund."),
    (("order", "track"), "You can track your order using the tracking ID sent to your email."),
    (("hello", "hi"), "Hello! How can I help you today?"),
    (("availability", "stock"), "Please provide the product name so I can check its availability."),
    (("hours", "timing"), "Our store is open from 9 AM to 9 PM, Monday to Saturday."),
    (("contact", "support"), "You can contact our support team at [email] or call 1800-123-456."),
    (("delivery", "shipping"), "Standard delivery takes 3-5 business days."),
    (("discount", "offer"), "We have up to 30% off on electronics this week!"),
)


def contains_keyword(text: str, keyword: str) -> bool:
    """Tell whether keyword occurs anywhere in text, ignoring case."""
    return keyword.lower() in text.lower()


def reply(message: str) -> str:
    """Return the bot's answer to a message."""
    return next(
        (
            answer
            for keywords, answer in _RULES
            if any(contains_keyword(message, keyword) for keyword in keywords)
        ),
        FALLBACK,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Chat on standard input until the user types exit."""
    print(f"Welcome to {BOT_NAME}! How can I assist you today?")
    print("Type 'exit' to end the chat.\n")
    while True:
        print("You: ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            print()
            return 0
        message = line.rstrip("\r\n")
        if message.lower() == "exit":
            print(f"{BOT_NAME}: {FAREWELL}")
            return 0
        print(f"{BOT_NAME}: {reply(message)}")