"""Constants and mappings for the Top 6 ranking engine."""

# Placeholder club used by the league for bye fixtures
BYE_CLUB = '-'
BYE_TEAM_MARKER = 'Bye'

# Marker appended to a score modified by an administrator
MODIFIED_SCORE_MARKER = 'sm'

# Sets needed to win an individual game (best of 5)
WINNING_SET_COUNT = 3

# Individual games a player plays in a team match
GAMES_PER_PLAYER = 4

# A full sweep (victories + forfeits == 4) is worth a bonus point
BONUS_POINTS = 5

# Achievable per-match values; 4 can never be produced
POINT_BUCKETS = (5, 3, 2, 1, 0)

HOME = 'Home'
AWAY = 'Away'
SIDES = (HOME, AWAY)

# Placeholder values used for records created by an administrator override
OVERRIDE_PLACEHOLDER = 'NA'

# Level given to a player without any record
LEVEL_NA = 'NA'

# Runtime defaults (overridable from the environment)
DEFAULT_WEEK_NAME = 22
DEFAULT_PLAYERS_IN_TOP = 24
