"""Configuration settings for the log analyzer."""

# Log file analyzed when none is given
DEFAULT_LOGFILE = 'demo.log'

# Bucket sizes
HOURS_PER_DAY = 24
MONTHS_PER_YEAR = 12

# User agent fragments that mark a request as bot traffic
BOT_SIGNATURES = {
    'googlebot', 'bingbot', 'slurp', 'duckduckbot', 'baiduspider',
    'yandexbot', 'facebookexternalhit', 'twitterbot', 'linkedinbot',
    'applebot', 'amazonbot', 'crawl', 'spider', 'bot', 'scraper',
    'curl', 'wget', 'python-requests', 'httpie',
    'gptbot', 'chatgpt', 'claudebot', 'perplexitybot', 'ccbot',
}

# Logging settings
LOG_SETTINGS = {
    'level': 'WARNING',
    'format': '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
    'date_format': '%Y-%m-%d %H:%M:%S',
}

# Export settings
EXPORT_SETTINGS = {
    'output_dir': 'exports',
    'csv_delimiter': ',',
    'timestamp_format': '%Y-%m-%d %H:%M:%S',
    'chart_width': 1200,
    'chart_height': 800,
}

# Synthetic log generation
SAMPLE_SETTINGS = {
    'num_lines': 100,
    'first_year': 2018,
    'last_year': 2019,
}

# Labels used by the presentation layer
MONTH_NAMES = [
    'Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
    'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec',
]
