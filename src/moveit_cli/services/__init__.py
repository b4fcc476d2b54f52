"""Services orchestrating timer phases and notifications."""
