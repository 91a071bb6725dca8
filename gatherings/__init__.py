"""In-memory event planning engine: store, RSVP aggregation and creation wizard."""
