"""
Response composer module for the Air Quality Assistant.

This module contains the ResponseComposer class which renders the templated
answer for a classified intent. Templates always read the session data at the
moment they are rendered, not when the question was asked: if the session is
refreshed while a response is pending, the newest data wins.

All response text is in Spanish.
"""

from .best_window import BestWindowRecommender
from .intent_router import Intent
from .session import SessionContext

# AQI thresholds used by the advice branches
SAFE_AQI_THRESHOLD = 100  # below: safe to ventilate / go outside
SENSITIVE_AQI_THRESHOLD = 100  # above: limit outdoor time for children

NO_DATA_MESSAGE = "Lo siento, no tengo datos actuales disponibles en este momento."

GREETING_MESSAGE = (
    "¡Hola! Soy tu asistente de calidad del aire. Puedo ayudarte con "
    "recomendaciones personalizadas sobre actividades al aire libre. "
    "¿En qué te puedo ayudar?"
)

# Used by the forecast branch when there is no forecast to compute from
STATIC_FORECAST_MESSAGE = (
    "🔮 Pronóstico para mañana:\n\n"
    "Según los datos de TEMPO, esperamos condiciones similares con AQI entre 70-95. "
    "Las mejores horas serán de 6:00 a 9:00 AM y después de las 7:00 PM."
)


class ResponseComposer:
    """
    Renders assistant responses from the current session data.

    The composer never modifies the session. It asks the recommender for the
    best hours only when a template needs them.
    """

    def __init__(self, session: SessionContext, recommender: BestWindowRecommender = None):
        """
        Args:
            session: Shared session context to read data from
            recommender: Best window recommender, a default one if omitted
        """
        self.session = session
        self.recommender = recommender if recommender is not None else BestWindowRecommender()

    def compose(self, intent: Intent) -> str:
        """
        Renders the response for an intent.

        When no snapshot is available every intent short-circuits to the same
        apology message and no branch logic runs.

        Args:
            intent: Classified intent of the user message

        Returns:
            The response text
        """
        current = self.session.get_snapshot()
        if current is None:
            return NO_DATA_MESSAGE

        if intent is Intent.ACTIVITY:
            return self._activity_advice(current)
        elif intent is Intent.VENTILATION:
            return self._ventilation_advice(current)
        elif intent is Intent.OUTDOORS:
            return self._conditions_summary(current)
        elif intent is Intent.FORECAST:
            return self._forecast_outlook()
        elif intent is Intent.SENSITIVE_GROUPS:
            return self._sensitive_group_advice(current)
        else:
            return self._data_summary(current)

    def _activity_advice(self, current) -> str:
        windows = self.recommender.best_hours(self.session.get_forecast())
        best_hours = ", ".join(self.recommender.format_hours(windows))
        return (
            "🏃‍♂️ Para correr con mejor calidad del aire, te recomiendo:\n\n"
            f"⏰ Mejores horarios: {best_hours}\n\n"
            f"📊 AQI actual: {current.aqi} ({current.category.label})\n\n"
            f"💡 Consejo: Las primeras horas de la mañana suelen tener mejor calidad del aire en {self._city()}."
        )

    def _ventilation_advice(self, current) -> str:
        if current.aqi < SAFE_AQI_THRESHOLD:
            return (
                "✅ Es un buen momento para abrir las ventanas. "
                f"La calidad del aire es {current.category.label} con AQI de {current.aqi}."
            )
        return (
            "⚠️ No recomiendo abrir las ventanas ahora. "
            f"El AQI está en {current.aqi} ({current.category.label}). "
            "Mejor mantén las ventanas cerradas y usa purificadores de aire si los tienes."
        )

    def _conditions_summary(self, current) -> str:
        if current.aqi < SAFE_AQI_THRESHOLD:
            advice = "Es seguro salir, pero mantente hidratado."
        else:
            advice = "Considera limitar actividades intensas al aire libre."

        return (
            f"🌤️ Condiciones actuales en {self.session.location}:\n\n"
            f"📊 AQI: {current.aqi} - {current.category.label}\n"
            f"🌡️ Temperatura: {int(current.temperature)}°C\n"
            f"💧 Humedad: {current.humidity}%\n\n"
            f"{advice}"
        )

    def _forecast_outlook(self) -> str:
        # Computed from the live forecast rather than a fixed blurb
        forecast = self.session.get_forecast()
        if not forecast:
            return STATIC_FORECAST_MESSAGE

        lowest = min(point.aqi for point in forecast)
        highest = max(point.aqi for point in forecast)
        windows = self.recommender.best_hours(forecast, count=2)
        best_hours = " y ".join(f"{hour}:00" for hour, _ in windows)

        return (
            "🔮 Pronóstico para mañana:\n\n"
            f"Según el pronóstico actual, esperamos AQI entre {lowest}-{highest}. "
            f"Las mejores horas serán {best_hours}."
        )

    def _sensitive_group_advice(self, current) -> str:
        if current.aqi > SENSITIVE_AQI_THRESHOLD:
            return (
                f"👶 Con el AQI actual de {current.aqi}, recomiendo limitar el tiempo al aire libre "
                "para niños pequeños. Son más sensibles a la contaminación. "
                "Considera actividades en interiores."
            )
        return (
            f"👶 Las condiciones son aceptables para niños (AQI: {current.aqi}). "
            "Pueden jugar al aire libre, pero evita ejercicio muy intenso durante períodos prolongados."
        )

    def _data_summary(self, current) -> str:
        return (
            f"📊 Datos actuales de {self.session.location}:\n\n"
            f"• AQI: {current.aqi} ({current.category.label})\n"
            f"• PM2.5: {current.pm25:.1f} µg/m³\n"
            f"• NO₂: {current.no2:.1f} ppb\n"
            f"• O₃: {current.o3:.1f} ppb\n\n"
            "Pregúntame sobre actividades específicas para recibir recomendaciones personalizadas."
        )

    def _city(self) -> str:
        # "Monterrey, MX" -> "Monterrey"
        return self.session.location.split(",")[0].strip()
