"""Game leaderboard backend with user registration and JWT auth."""
