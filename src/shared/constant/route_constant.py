# API Route Constants

# Base API
API_BASE = '/api'

# User routes
USER_BASE = f'{API_BASE}/user'
USER_CREATE = USER_BASE
USER_LOGIN = f'{USER_BASE}/login'
USER_LOGOUT = f'{USER_BASE}/logout'
USER_ME = f'{USER_BASE}/me'

# Product routes
PRODUCT_BASE = f'{API_BASE}/products'
PRODUCT_GET = f'{PRODUCT_BASE}/{{product_id}}'
PRODUCT_SELL = f'{PRODUCT_BASE}/{{product_id}}/sell'
PRODUCT_STATS = f'{PRODUCT_BASE}/stats'
PRODUCT_LOW_STOCK = f'{PRODUCT_BASE}/low-stock'
PRODUCT_SUPPLIERS = f'{PRODUCT_BASE}/suppliers'

# Supplier routes
SUPPLIER_BASE = f'{API_BASE}/suppliers'
SUPPLIER_GET = f'{SUPPLIER_BASE}/{{supplier_id}}'
SUPPLIER_NAMES = f'{SUPPLIER_BASE}/names'

# Transaction routes
TRANSACTION_BASE = f'{API_BASE}/transactions'
TRANSACTION_GET = f'{TRANSACTION_BASE}/{{transaction_id}}'
TRANSACTION_STATS = f'{TRANSACTION_BASE}/stats'
TRANSACTION_DAILY_SALES = f'{TRANSACTION_BASE}/daily-sales'
TRANSACTION_RECENT = f'{TRANSACTION_BASE}/recent'
TRANSACTION_REPORT = f'{TRANSACTION_BASE}/report'

# System routes
HEALTH = '/health'
