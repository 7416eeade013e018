"""
Business services: cart and checkout, inventory rules, finance and
dashboard aggregation, QR labels.
"""
