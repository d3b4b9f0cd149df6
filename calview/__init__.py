"""calview: month/week calendar grid, event layout and validation."""
