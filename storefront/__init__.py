# Storefront API
