"""Infrastructure: note loading, lesson execution, template rendering."""
