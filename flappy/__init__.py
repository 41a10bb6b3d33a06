"""Terminal-style Flappy game drawn on a character grid."""
