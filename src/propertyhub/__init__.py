"""
PropertyHub core application: listings, reports, moderation and appeals.
"""
