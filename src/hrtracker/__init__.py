"""hrtracker — recurring-event schedules stored as versioned binary records."""

__version__ = "0.2.0"
