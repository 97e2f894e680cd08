"""
Response DTOs

Outgoing user shapes, including fields derived at request time such as age.
"""
