import azure.functions as func

from filmorate_recommendation_service.blueprints import films_bp, recommendations_bp

app = func.FunctionApp()

app.register_blueprint(films_bp)
app.register_blueprint(recommendations_bp)
