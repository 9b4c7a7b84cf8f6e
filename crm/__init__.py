"""Personal CRM backend: contacts, ordered tasks and reminders."""
