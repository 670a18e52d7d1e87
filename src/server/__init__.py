"""Preview server for mdsite artifacts."""
