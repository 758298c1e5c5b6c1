"""Constants for ellenplanner.

Scheduling window and search horizons. Runtime overrides live in ellenplanner.config.
"""


# Work window (hours, 24h clock). No lunch carve-out at this layer.
WORKDAY_START_HOUR = 9
WORKDAY_END_HOUR = 18

# Business days per week (Monday=0 ... Friday=4)
BUSINESS_DAYS_PER_WEEK = 5

# Calendar days examined by the phase scheduler when a day is full
FALLBACK_SEARCH_DAYS = 5

# Default calendar-day horizon for next_available_business_day
NEXT_FREE_DAY_HORIZON = 30

# Dutch weekday names, indexed by business index
DAY_NAMES = ["Maandag", "Dinsdag", "Woensdag", "Donderdag", "Vrijdag"]

# Meeting block labels
MEETING_DISCIPLINE = "Meeting"
MEETING_PROJECT_NUMBER = "MEETING"
MEETING_DEFAULT_CLIENT = "Intern"
