from django.db import models


class State(models.Model):
    name = models.CharField(max_length=80, unique=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name


class City(models.Model):
    state = models.ForeignKey(State, on_delete=models.CASCADE, related_name='cities')
    name = models.CharField(max_length=80)

    class Meta:
        ordering = ['name']
        constraints = [
            models.UniqueConstraint(fields=['state', 'name'], name='city_unique_per_state'),
        ]

    def __str__(self):
        return self.name
