# settings.py

# Pathfinding
PATHFIND_MAX_ITERATIONS = 10_000   # BFS node expansions before giving up

# Cooldowns (simulated milliseconds; see engine/ai/cooldowns.py)
MS_PER_TURN = 1000
ARCHER_SHOT_COOLDOWN_MS = 4000
BOSS_MESSAGE_COOLDOWN_MS = 5000

# Archer
ARCHER_BASE_DAMAGE = 4

# Tactical knowledge
TIER_THRESHOLDS = {
    "learning": 3,
    "adapted": 7,
    "master": 10,
}
LEARNING_KITE_THRESHOLD = 3        # times kited before Learning enemies double-step
KNOWLEDGE_HISTORY_SIZE = 10        # recent player tactics remembered

# Master tier
MASTER_DESCEND_RANGE = 2           # Manhattan distance for dive attempts
MASTER_DESCEND_ODDS = 3            # 1-in-N chance per turn

# Boss teleport spread around the player (tiles, each axis)
BOSS_TELEPORT_RADIUS = 2

# Message glyphs
USE_UNICODE_GLYPHS = True

# Message log
MESSAGE_LOG_MAX = 60
