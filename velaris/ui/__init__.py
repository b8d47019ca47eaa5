"""NiceGUI interface - thin visualization layer over the chat session.

Responsibilities:
    - Transcript display per message role
    - Typing indicator while a reply is pending
    - Error banner with a retry action
    - Auto-scroll to the latest entry

Contains no business logic. Reads SessionController state and forwards
user intents (submit, retry) back to it.
"""
