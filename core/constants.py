from django.db import models


class ChatTopic(models.TextChoices):
    PRAYER = "prayer", "Divine Prayer"
    PARABLE = "parable", "Sacred Wisdom"
    WWJD = "wwjd", "Holy Guidance"
    KINDNESS = "kindness", "Acts of Grace"


# Dashboard cards, in the order they are laid out (nw, ne, sw, se)
topic_cards = [
    {
        "chatId": ChatTopic.PRAYER.value,
        "title": ChatTopic.PRAYER.label,
        "description": "Commune with the Divine",
        "icon": "🙏",
        "route": "/prayer",
    },
    {
        "chatId": ChatTopic.PARABLE.value,
        "title": ChatTopic.PARABLE.label,
        "description": "Ancient Teachings",
        "icon": "📖",
        "route": "/wisdom",
    },
    {
        "chatId": ChatTopic.WWJD.value,
        "title": ChatTopic.WWJD.label,
        "description": "Walk in His Light",
        "icon": "✝️",
        "route": "/guidance",
    },
    {
        "chatId": ChatTopic.KINDNESS.value,
        "title": ChatTopic.KINDNESS.label,
        "description": "Share His Love",
        "icon": "🕊️",
        "route": "/acts",
    },
]

dashboard_verses = [
    {"text": "Be strong and courageous", "reference": "Joshua 1:9"},
    {"text": "I can do all things through Christ", "reference": "Philippians 4:13"},
    {"text": "The Lord is my shepherd", "reference": "Psalm 23:1"},
    {"text": "Let your light shine before others", "reference": "Matthew 5:16"},
]

# User-facing replies of the chat endpoint
PLACEHOLDER_RESPONSE = (
    "I apologize, but I am unable to provide a response at this moment. "
    "Please try again."
)
APOLOGY_RESPONSE = (
    "My child, I apologize but I am unable to respond at this moment. "
    "Please try again and I will be here to guide you."
)
METHOD_NOT_ALLOWED_ERROR = "Method not allowed"
