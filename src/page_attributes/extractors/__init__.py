"""Attribute extractors operating on a parsed BeautifulSoup tree."""
