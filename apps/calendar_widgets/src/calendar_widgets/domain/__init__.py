"""Calendar domain rules: years, month lengths, locales and date formats."""
