"""Solace microservices.

- Thinking Service: stateless sequential thinking steps for the grief
  coaching assistant, with keyword crisis screening at step 1
"""
