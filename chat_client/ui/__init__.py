"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Chat message display with a typing indicator
    - File picker that uploads the chosen document immediately
    - Transcript download as a spreadsheet
    - Dark/light theme toggle

Contains no business logic. Delegates all operations to the conversation
controller through explicit element handles.
"""
