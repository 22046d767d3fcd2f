"""Config metadata for the ActiveCampaign, Adobe Analytics and Amplitude destinations."""