"""pricewatch: periodic price checks for tracked product pages."""
