"""
blockhtml_server — persistance des projets (blocs nommés) + API REST.
Démarrer : uvicorn blockhtml_server.api.main:app --reload --port 8001
"""
__version__ = "0.1.0"
