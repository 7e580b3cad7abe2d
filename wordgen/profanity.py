"""
Built-in profanity denylist. Exact-word membership, lowercase.
"""
from __future__ import annotations

PROFANE_WORDS: frozenset[str] = frozenset({
    # Vulgar
    "shit", "shits", "shitty", "shitting", "bullshit", "horseshit",
    "fuck", "fucks", "fucked", "fucker", "fuckers", "fucking",
    "damn", "damned", "dammit", "goddamn",
    "ass", "arse", "arses", "asses", "asshole", "arsehole",
    "bitch", "bitches", "bitchy",
    "bastard", "bastards",
    "crap", "crappy",
    "piss", "pissed", "pissing",
    "dick", "dicks", "dickhead",
    "cock", "cocks",
    "prick", "pricks",
    "pussy", "pussies",
    "cunt", "cunts",
    "twat", "twats",
    "wank", "wanker", "wankers",
    "bollocks", "bugger",
    "tits", "titty", "titties", "boobs", "boobies",
    "boner", "boners", "dildo", "dildos",
    "jizz", "cum", "cumming", "spunk",
    "slut", "sluts", "slutty",
    "whore", "whores", "hooker",
    "porn", "porno", "horny",
    "turd", "turds", "douche", "skank",
    # Slurs
    "nigger", "niggers", "nigga", "niggas",
    "faggot", "faggots", "fag", "fags", "dyke", "dykes",
    "retard", "retards", "retarded",
    "spic", "spics", "chink", "chinks", "kike", "kikes",
    "gook", "gooks", "wetback", "tranny",
})
