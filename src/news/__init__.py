"""
News Module
===========

Create, edit and list news records tagged with category ids:
- Raw JSON type checks ahead of form decoding
- Pydantic request forms with trimming and length rules
- Service translating edit forms into sparse updates
"""
