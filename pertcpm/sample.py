# Format: (id, duration, predecessor ids separated by commas, "-" if none)
SAMPLE_PROJECT = [
    ("A", 2, "-"),
    ("B", 6, "K,L"),
    ("C", 10, "N"),
    ("D", 6, "C"),
    ("E", 4, "C"),
    ("F", 5, "E"),
    ("G", 7, "D"),
    ("H", 9, "E,G"),
    ("I", 7, "C"),
    ("J", 8, "F, I"),
    ("K", 4, "J"),
    ("L", 5, "J"),
    ("M", 2, "H"),
    ("N", 4, "A"),
]
