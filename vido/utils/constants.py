"""
Constantes globales pour Vido.

Ce module contient les listes de tags utilisees par l'extraction de motifs:
- Tags de qualite qui ne sont jamais des groupes de fansub
- Tags de resolution, de source et de codec retires des titres
- Seuils de confiance de la cascade de matching
"""

# Contenu de crochet a ne pas confondre avec un groupe de fansub
QUALITY_BRACKET_TAGS = frozenset({
    "1080p",
    "720p",
    "480p",
    "2160p",
    "4k",
    "uhd",
    "x264",
    "x265",
    "hevc",
    "aac",
    "flac",
    "bd",
    "web",
    "hdtv",
})

# Tags de resolution nommes (les resolutions numeriques sont traitees par motif)
RESOLUTION_TAGS = ("4k", "uhd", "sd")

# Tags de source video
SOURCE_TAGS = (
    "blu-?ray",
    "bdrip",
    "brrip",
    "web-?dl",
    "webrip",
    "hdtv",
    "dvdrip",
    "dvd",
    "cam",
    "ts",
)

# Tags de codec video et audio
CODEC_TAGS = (
    r"x264",
    r"h\.?264",
    r"x265",
    r"h\.?265",
    r"hevc",
    r"av1",
    r"xvid",
    r"aac",
    r"ac3",
    r"dts",
    r"flac",
)

# Confiances fixes par etape de la cascade
EXACT_MATCH_CONFIDENCE = 1.0
PATTERN_MATCH_CONFIDENCE = 0.95
REGEX_MATCH_CONFIDENCE = 0.9

# Similarite minimale (strictement depassee) pour un match flou
DEFAULT_FUZZY_THRESHOLD = 0.8

# Confiance a partir de laquelle un motif existant evite un doublon
DEFAULT_DUPLICATE_THRESHOLD = 0.95
