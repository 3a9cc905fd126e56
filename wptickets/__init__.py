"""wptickets — support forum resolution status for WordPress plugins."""
