"""Terminal front end for the tsukumo calculator."""
