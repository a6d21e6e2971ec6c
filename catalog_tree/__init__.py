"""Category hierarchy engine for the storefront admin"""
