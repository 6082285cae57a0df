"""MerchFlow — merchandise ordering API for dealers, vendors and admins."""
