"""
Configuration settings for the Flexpool API client and reports.
"""

# API configuration
API_CONFIG = {
    "base_url": "https://flexpool.io/api/v1",
    "timeout": 30,                      # Seconds, applied to every request
    "content_type": "application/json"
}

# Report configuration
REPORT_CONFIG = {
    "block_pages": 10,                  # Pages of pool blocks sampled by poolinfo
    "page_delay_seconds": 0.2,          # Pause between page requests, 0 disables
    "pplns_n": 2_000_000,               # Shares in the PPLNS window
    "share_difficulty": 4_000_000_000,  # 4 GH share difficulty
    "payments_page": 0,
    "blocks_page": 0
}
