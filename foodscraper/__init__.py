"""Recipe scraper package."""
