"""Launch the catalog browser against the Art Institute of Chicago listing."""

import catalog_browser as cb

config = cb.BrowserConfig.from_env()

print(f"Listing endpoint: {config.api_url}")
print(f"Page size: {config.page_size}")
print("Launching browser...")

cb.explore(url=config.api_url, page_size=config.page_size)
