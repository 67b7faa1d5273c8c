"""Step timing extraction, aggregation and reporting."""
