"""Domain layer: topics, categories, glossary. No I/O beyond parsing text."""
