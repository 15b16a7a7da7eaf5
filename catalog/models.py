from django.db import models


class MembershipTier(models.Model):
    tier = models.CharField(max_length=50, unique=True)
    name_en = models.CharField(max_length=100)
    name_ar = models.CharField(max_length=100, blank=True, null=True)
    name_de = models.CharField(max_length=100, blank=True, null=True)
    name_tr = models.CharField(max_length=100, blank=True, null=True)
    description_en = models.TextField()
    description_ar = models.TextField(blank=True, null=True)
    description_de = models.TextField(blank=True, null=True)
    description_tr = models.TextField(blank=True, null=True)
    # Benefits are stored pipe-separated, e.g. "10% off|Free drink".
    benefits_en = models.TextField(blank=True, null=True)
    benefits_ar = models.TextField(blank=True, null=True)
    benefits_de = models.TextField(blank=True, null=True)
    benefits_tr = models.TextField(blank=True, null=True)
    price = models.IntegerField(help_text='Price in cents')
    discount_percentage = models.IntegerField(default=0)
    validity = models.IntegerField(help_text='Validity in days')
    color = models.CharField(max_length=20, default='#000000')
    is_popular = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'memberships'
        ordering = ['id']

    def __str__(self):
        return f"{self.tier} - {self.name_en}"


class ServiceGroup(models.Model):
    slug = models.SlugField(max_length=100, unique=True)
    name_en = models.CharField(max_length=100)
    name_ar = models.CharField(max_length=100, blank=True, null=True)
    name_de = models.CharField(max_length=100, blank=True, null=True)
    name_tr = models.CharField(max_length=100, blank=True, null=True)
    description_en = models.TextField(blank=True, null=True)
    description_ar = models.TextField(blank=True, null=True)
    description_de = models.TextField(blank=True, null=True)
    description_tr = models.TextField(blank=True, null=True)
    icon = models.CharField(max_length=50, blank=True, null=True)
    display_order = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'service_groups'
        ordering = ['display_order', 'id']

    def __str__(self):
        return self.name_en


class Service(models.Model):
    slug = models.SlugField(max_length=100, unique=True)
    category = models.CharField(max_length=100, blank=True, null=True)
    group = models.ForeignKey(
        ServiceGroup, related_name='services', on_delete=models.PROTECT, null=True, blank=True
    )
    name_en = models.CharField(max_length=100)
    name_ar = models.CharField(max_length=100, blank=True, null=True)
    name_de = models.CharField(max_length=100, blank=True, null=True)
    name_tr = models.CharField(max_length=100, blank=True, null=True)
    description_en = models.TextField()
    description_ar = models.TextField(blank=True, null=True)
    description_de = models.TextField(blank=True, null=True)
    description_tr = models.TextField(blank=True, null=True)
    long_description_en = models.TextField(blank=True, null=True)
    long_description_ar = models.TextField(blank=True, null=True)
    long_description_de = models.TextField(blank=True, null=True)
    long_description_tr = models.TextField(blank=True, null=True)
    duration = models.IntegerField(help_text='Duration in minutes')
    price = models.IntegerField(help_text='Price in cents')
    image_url = models.URLField(blank=True, null=True)
    image_large = models.URLField(blank=True, null=True)
    is_active = models.BooleanField(default=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'services'
        ordering = ['id']

    def __str__(self):
        return self.name_en
