# Routes package init
"""
Movie Library API - Routes Package
==================================

Route Inventory:
    - root.py:     GET    /                              (welcome text)
    - movies.py:   GET    /movies                        (list with average rating)
                   GET    /movies/search?q=              (title/director search)
                   POST   /movies                        (create)
                   GET    /movies/{id}                   (detail)
                   PUT    /movies/{id}                   (replace)
                   DELETE /movies/{id}                   (delete)
                   GET    /movies/{id}/average-rating    (mean rating)
    - reviews.py:  GET    /movies/{id}/reviews           (list for movie)
                   POST   /movies/{id}/reviews           (create)
                   DELETE /reviews/{id}                  (delete)
    - health.py:   GET    /health                        (service health check)

Routes are thin: parse input, call a store, choose the status code.
"""
