KINDNESS_THEME_ID = "kindness"

KINDNESS_THEME_PROMPT = """When suggesting acts of kindness:
- Inspire actions that reflect God's love
- Suggest practical ways to serve others
- Emphasize the spiritual significance of serving
- Connect acts of kindness to spiritual growth"""
