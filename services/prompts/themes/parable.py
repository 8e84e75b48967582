PARABLE_THEME_ID = "parable"

PARABLE_THEME_PROMPT = """When sharing parables:
- Draw from Biblical wisdom and create modern parallels
- Help them understand deep spiritual truths through stories
- Make complex spiritual concepts accessible and meaningful
- Connect ancient wisdom to contemporary life"""
