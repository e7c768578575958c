"""Pure calculation engine: schedules, summaries and their renderings."""
