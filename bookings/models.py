from django.db import models


class Booking(models.Model):
    STATUS_CHOICES = [
        ('pending', 'Pending'),
        ('confirmed', 'Confirmed'),
        ('cancelled', 'Cancelled'),
        ('completed', 'Completed'),
    ]

    name = models.CharField(max_length=100)
    email = models.EmailField(max_length=100, db_index=True)
    phone = models.CharField(max_length=20)
    # Id of a catalog.Service row; stored as a plain integer reference.
    service = models.IntegerField(db_column='service_id', db_index=True)
    date = models.CharField(max_length=10, help_text='YYYY-MM-DD')
    time = models.CharField(max_length=8, help_text='HH:MM')
    vip_number = models.CharField(max_length=50, blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='pending', db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'bookings'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.name} - {self.date} {self.time} - {self.status}"


class BlockedTimeSlot(models.Model):
    date = models.CharField(max_length=10, db_index=True)
    time = models.CharField(max_length=8)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'blocked_time_slots'
        ordering = ['date', 'time']

    def __str__(self):
        return f"{self.date} {self.time}"
