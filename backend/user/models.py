import uuid

from django.core.validators import MinValueValidator
from django.db import models,transaction
from django.conf import settings
from django.db.models import F

from events.models import InterestCategory


class UserProfile(models.Model):
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="profile"
    )
    id = models.UUIDField(primary_key=True,default=uuid.uuid4,editable=False)
    full_name = models.CharField(max_length=150,blank=True,default="")
    avatar_url = models.URLField(max_length=500,blank=True,null=True)
    bio = models.TextField(editable=True,max_length=200,blank=True,default="")
    followers_count = models.IntegerField(validators=[MinValueValidator(0)],default=0)
    following_count = models.IntegerField(validators=[MinValueValidator(0)],default=0)
    is_verified = models.BooleanField(null=False,default=False)
    following = models.ManyToManyField(
        'self',
        through='FollowRelation',
        through_fields=('follower','following'),
        symmetrical=False,
        related_name='followers'
    )

    def __str__(self):
        return self.user.username

    def interest_keys(self) -> set:
        return set(self.interests.values_list('tag',flat=True))

    def set_interests(self,tags):
        """Replaces the user's interests with the given InterestCategory keys."""
        with transaction.atomic():
            UserInterest.objects.filter(user=self).delete()
            UserInterest.objects.bulk_create(
                [UserInterest(user=self,tag=InterestCategory(tag)) for tag in set(tags)]
            )

    def followed_ids(self) -> set:
        return set(FollowRelation.objects.filter(follower=self).values_list('following_id',flat=True))


    def follow(self,target_profile: "UserProfile"):
        if self != target_profile and not self.is_following(target_profile):
            with transaction.atomic():
                FollowRelation.objects.create(follower=self,following=target_profile)

                self.following_count = F('following_count') + 1
                self.save(update_fields=['following_count'])

                target_profile.followers_count = F('followers_count') + 1
                target_profile.save(update_fields=['followers_count'])


    def unfollow(self,target_profile: "UserProfile"):
        if self != target_profile and self.is_following(target_profile):
            with transaction.atomic():
                FollowRelation.objects.filter(follower=self,following=target_profile).delete()

                self.following_count = F('following_count') - 1
                self.save(update_fields=['following_count'])

                target_profile.followers_count = F('followers_count') - 1
                target_profile.save(update_fields=['followers_count'])


    def is_following(self,target_profile):
        return FollowRelation.objects.filter(follower=self,following =target_profile).exists()




class FollowRelation(models.Model) :
    follower = models.ForeignKey(UserProfile, on_delete=models.CASCADE, related_name="following_relation")
    following = models.ForeignKey(UserProfile, on_delete=models.CASCADE, related_name="follower_relation")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        unique_together = ('follower', 'following')


class UserInterest(models.Model):
    user = models.ForeignKey(UserProfile, on_delete=models.CASCADE, related_name="interests")
    tag = models.CharField(max_length=30, choices=InterestCategory.choices)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ('user', 'tag')

    def __str__(self):
        return f"{self.user} - {self.tag}"
