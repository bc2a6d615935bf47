"""
Place-search integration layer.

Responsibilities:
- Manage Kakao Local API configuration and credentials.
- Build keyword-search requests for a coordinate, radius and page.
- Decode the JSON response into typed place records.
- Translate transport and decoding failures into lunchpick errors.
"""
