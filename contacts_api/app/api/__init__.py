"""
HTTP layer.

``endpoints`` holds one module per operation and ``router`` lists them
for registration on the application.
"""
