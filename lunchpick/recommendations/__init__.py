"""
Lunch menu recommendation engine.

Responsibilities:
- Classify places into food categories and map categories to API codes.
- Fetch and merge nearby restaurants from two result pages.
- Filter menus by category, skip recent picks and choose one at random.
- Record every pick in the persisted recommendation history.
"""
