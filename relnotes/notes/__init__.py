"""Release notes domain: versions, releases, range selection, rendering."""
