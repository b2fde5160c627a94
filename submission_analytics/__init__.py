"""
Submission analytics.

Behavioral and statistical summaries of a user's assignment submission
history: distributions, trends, heatmaps, streaks, deadline risk and a
composite procrastination profile.
"""

__version__ = "0.1.0"
