"""Request schemas validated at the HTTP boundary."""
